import enum


class License(enum.Enum):
    """
    Licenses whose headers licenselint knows how to check and write.
    """
    APACHE_20 = "Apache-2.0"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> 'License':
        for license in cls:
            if license.value == value:
                return license
        known = ', '.join(l.value for l in cls)
        raise ValueError(f"Unknown license: {value} (known: {known})")
