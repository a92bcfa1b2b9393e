"""Schema definitions for name records and filter criteria."""

from typing import Any, Dict, FrozenSet, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    """Gender association of a name."""
    MALE = "male"
    FEMALE = "female"
    UNISEX = "unisex"

    @classmethod
    def parse(cls, value: Any) -> "Gender":
        """Coerce a gender string like 'Female' into the enumeration."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown gender: {value!r}")


class NameRecord(BaseModel):
    """A single Khmer name in native script and romanized form."""
    model_config = ConfigDict(frozen=True)

    given_name: str = Field(..., min_length=1)
    surname: str = Field(..., min_length=1)
    romanized_given: str = Field(..., min_length=1)
    romanized_surname: str = Field(..., min_length=1)
    gender: Gender
    meaning: Optional[str] = None
    origin: Optional[str] = None
    category: Optional[str] = None
    is_popular: bool = False

    @field_validator('gender', mode='before')
    @classmethod
    def validate_gender(cls, v):
        return Gender.parse(v)

    @field_validator('meaning', 'origin', 'category')
    @classmethod
    def validate_optional_text(cls, v):
        if v is not None and not v:
            raise ValueError("Optional fields must be omitted rather than empty")
        return v

    @property
    def full_name(self) -> str:
        """Full name in Khmer script, surname first."""
        return f"{self.surname} {self.given_name}"

    @property
    def romanized_name(self) -> str:
        """Full romanized name, surname first."""
        return f"{self.romanized_surname} {self.romanized_given}"

    def __str__(self) -> str:
        return self.romanized_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase interchange dictionary."""
        data = {
            "givenName": self.given_name,
            "surname": self.surname,
            "romanizedGiven": self.romanized_given,
            "romanizedSurname": self.romanized_surname,
            "gender": self.gender.value,
        }
        for key, value in (("meaning", self.meaning), ("origin", self.origin), ("category", self.category)):
            if value is not None:
                data[key] = value
        data["isPopular"] = self.is_popular
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NameRecord":
        """Create a record from the camelCase interchange dictionary."""
        return cls(
            given_name=data.get("givenName"),
            surname=data.get("surname"),
            romanized_given=data.get("romanizedGiven"),
            romanized_surname=data.get("romanizedSurname"),
            gender=data.get("gender"),
            meaning=data.get("meaning"),
            origin=data.get("origin"),
            category=data.get("category"),
            is_popular=data.get("isPopular") or False,
        )


class FilterCriteria(BaseModel):
    """Optional constraints on a name query. Unset fields impose no restriction."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    gender: Optional[Gender] = None
    origin: Optional[str] = None
    category: Optional[str] = None
    popular_only: bool = False
    meaning_contains: Optional[str] = None
    exact_meaning: Optional[str] = None
    starts_with: Optional[str] = None
    min_popularity_score: Optional[int] = None
    allowed_categories: Optional[FrozenSet[str]] = None

    @field_validator('gender', mode='before')
    @classmethod
    def validate_gender(cls, v):
        if v is None:
            return v
        return Gender.parse(v)

    def is_empty(self) -> bool:
        """True when no constraint is set."""
        return self == FilterCriteria()

    def copy_with(self, **changes: Any) -> "FilterCriteria":
        """Return a copy with the given non-None fields replaced."""
        values = self.model_dump()
        values.update({key: value for key, value in changes.items() if value is not None})
        return FilterCriteria(**values)

    def __str__(self) -> str:
        parts = [
            f"{name}={value!r}" for name, value in self.model_dump(mode="json").items()
            if value is not None and value is not False
        ]
        return f"FilterCriteria({', '.join(parts)})"

    @classmethod
    def male(cls) -> "FilterCriteria":
        return cls(gender=Gender.MALE)

    @classmethod
    def female(cls) -> "FilterCriteria":
        return cls(gender=Gender.FEMALE)

    @classmethod
    def popular(cls) -> "FilterCriteria":
        return cls(popular_only=True)

    @classmethod
    def traditional(cls) -> "FilterCriteria":
        return cls(category="traditional")

    @classmethod
    def modern(cls) -> "FilterCriteria":
        return cls(category="modern")
