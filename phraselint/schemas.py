from enum import IntEnum
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Issue schemas
class IssueCode(IntEnum):
    """Numeric codes attached to every reported issue."""
    MISSING_PROP = 1011

class IssueMissingProp(BaseModel):
    """A locale's object value lacks sub-properties present in the reference shape."""
    code: Literal[IssueCode.MISSING_PROP] = Field(IssueCode.MISSING_PROP, description="Issue code, fixed as 1011")
    props: List[str] = Field(..., description="Missing property names, in reference key order")

    model_config = ConfigDict(frozen=True)

IssueDesc = IssueMissingProp

class Issue(BaseModel):
    """A single finding for one locale file and one top-level key."""
    file: str = Field(..., description="Locale file name, e.g. 'fi.json'")
    key: str = Field(..., description="Top-level translation key")
    issue: IssueDesc

    model_config = ConfigDict(frozen=True)

    @classmethod
    def missing_prop(cls, key: str, file: str, props: List[str]) -> "Issue":
        return cls(key=key, file=file, issue=IssueMissingProp(props=props))

# Error schemas
class ErrorKind(IntEnum):
    NO_ENTRY_DIR = 9
    NO_REFERENCE_LOCALE = 10
    COULD_NOT_PARSE_JSON = 11

class NoEntryDirError(BaseModel):
    """The entry directory is missing or cannot be listed."""
    code: Literal[ErrorKind.NO_ENTRY_DIR] = ErrorKind.NO_ENTRY_DIR
    message: Literal["Entry directory does not exist"] = "Entry directory does not exist"
    dir: str

class NoReferenceLocaleError(BaseModel):
    """The reference locale file is not among the parsed files."""
    code: Literal[ErrorKind.NO_REFERENCE_LOCALE] = ErrorKind.NO_REFERENCE_LOCALE
    message: Literal["Reference locale file does not exist"] = "Reference locale file does not exist"
    file: str

class CouldNotParseJsonError(BaseModel):
    """A candidate locale file could not be read or parsed as JSON."""
    code: Literal[ErrorKind.COULD_NOT_PARSE_JSON] = ErrorKind.COULD_NOT_PARSE_JSON
    message: Literal["Could not parse JSON file"] = "Could not parse JSON file"
    file: str

AppError = Union[NoEntryDirError, NoReferenceLocaleError, CouldNotParseJsonError]
