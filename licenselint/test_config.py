import pytest

from licenselint.config import Config, format_author, current_year
from licenselint.license import License


def test_license_parse():
    assert License.parse("Apache-2.0") is License.APACHE_20
    assert str(License.APACHE_20) == "Apache-2.0"
    with pytest.raises(ValueError):
        License.parse("MIT")


def test_from_author_allows_primary_author():
    config = Config.from_author(License.APACHE_20, "Jane Doe", "2023")
    assert config.formatted_author == "Jane Doe"
    assert config.allowed_authors == ("Jane Doe",)


def test_primary_author_always_allowed():
    config = Config(License.APACHE_20, "Jane Doe", "2023", ("John Roe",))
    assert config.allowed_authors == ("Jane Doe", "John Roe")


def test_with_allowed_author():
    config = Config.from_author(License.APACHE_20, "Jane Doe", "2023")
    extended = config.with_allowed_author("John Roe")
    assert extended.allowed_authors == ("Jane Doe", "John Roe")
    assert extended.formatted_author == "Jane Doe"
    assert config.allowed_authors == ("Jane Doe",)
    assert extended.with_allowed_author("John Roe") is extended


@pytest.mark.parametrize("year", ["97", "20233", "abcd", "", "２０２３"])
def test_invalid_year(year):
    with pytest.raises(ValueError):
        Config.from_author(License.APACHE_20, "Jane Doe", year)


def test_empty_author():
    with pytest.raises(ValueError):
        Config.from_author(License.APACHE_20, "", "2023")


def test_format_author():
    assert format_author("Jane Doe") == "Jane Doe"
    assert format_author("Jane Doe", "jane@example.com") == "Jane Doe <jane@example.com>"


def test_current_year():
    year = current_year()
    assert len(year) == 4 and year.isdigit()
