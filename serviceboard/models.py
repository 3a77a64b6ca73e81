"""
Customer master data model

Mirrors the owner table (Tblanl_eigentuemer) of the maintenance database.
Attribute names are snake_case, column names keep the table's spelling.
"""

from sqlalchemy import Column, Integer, String, Text

from .config import CUSTOMER_TABLE_NAME
from .database import Base


class Customer(Base):
    """Customer / owner (Eigentümer) of a maintained installation"""

    __tablename__ = CUSTOMER_TABLE_NAME

    anl_id = Column("AnlID", Integer, primary_key=True, index=True)
    eigentuemer_nr = Column("EigentuemerNr", String(50), nullable=True, index=True)

    # Surname and first name are always present
    nachname = Column("Nachname", String(255), nullable=False, index=True)
    vorname = Column("Vorname", String(255), nullable=False)

    firma = Column("Firma", String(255), nullable=True)
    titel = Column("Titel", String(50), nullable=True)
    anrede = Column("Anrede", String(50), nullable=True)

    # Address
    strasse = Column("Strasse", String(255), nullable=True)
    haus_nr = Column("HausNr", String(20), nullable=True)
    plz = Column("PLZ", String(10), nullable=True)
    ort = Column("Ort", String(255), nullable=True, index=True)
    ortsteil = Column("Ortsteil", String(255), nullable=True)

    # Contact
    telefon_nr = Column("TelefonNr", String(50), nullable=True)
    telefon_nr_gesch = Column("TelefonNrGesch", String(50), nullable=True)
    mobil_nr = Column("MobilNr", String(50), nullable=True)
    email = Column("Email", String(255), nullable=True)

    anmerkungen = Column("Anmerkungen", Text, nullable=True)

    def __repr__(self):
        return f"<Customer {self.anl_id} {self.nachname}, {self.vorname}>"
