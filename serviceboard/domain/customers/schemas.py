"""Customer domain schemas - Pydantic models for the master data table"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from ...shared.formatting import format_address


class SortField(str, Enum):
    EIGENTUEMER_NR = "eigentuemerNr"
    NACHNAME = "nachname"
    VORNAME = "vorname"
    ORT = "ort"
    PLZ = "plz"
    EMAIL = "email"
    TELEFON_NR = "telefonNr"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


ALL_ORTE = "all"


class CustomerSchema(BaseModel):
    """Customer / owner row, serialized with camelCase keys"""

    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, alias_generator=to_camel
    )

    anl_id: int
    nachname: str
    vorname: str
    firma: Optional[str] = None
    titel: Optional[str] = None
    anrede: Optional[str] = None
    strasse: Optional[str] = None
    haus_nr: Optional[str] = None
    plz: Optional[str] = None
    ort: Optional[str] = None
    ortsteil: Optional[str] = None
    eigentuemer_nr: Optional[str] = None
    telefon_nr: Optional[str] = None
    telefon_nr_gesch: Optional[str] = None
    mobil_nr: Optional[str] = None
    email: Optional[str] = None
    anmerkungen: Optional[str] = None

    @computed_field
    @property
    def address(self) -> str:
        return format_address(self.strasse, self.haus_nr, self.plz, self.ort)


class CustomerQueryParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    search: str = ""
    filter_ort: str = ALL_ORTE
    sort_field: SortField = SortField.NACHNAME
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 1


class FilterOptions(BaseModel):
    orte: list[str] = []


class CustomerQueryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    data: list[CustomerSchema] = []
    total_count: int = 0
    filter_options: FilterOptions = Field(default_factory=FilterOptions)

    @classmethod
    def empty(cls) -> "CustomerQueryResult":
        return cls(data=[], total_count=0, filter_options=FilterOptions(orte=[]))


class CustomerCountResponse(BaseModel):
    count: int
