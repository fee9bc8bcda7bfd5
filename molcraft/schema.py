# molcraft/schema.py
"""
Wire schema for molecule records.

The data provider returns camelCase JSON:

    {formula, name, description, molecularGeometry, hybridization,
     resonanceInfo,
     atoms: [{id, element, x2d, y2d, x3d, y3d, z3d, lonePairs, charge}],
     bonds: [{source, target, order}]}

These pydantic models check that shape at the boundary and convert it to
the frozen dataclasses the engines consume. Required: formula, name, atoms,
bonds, molecularGeometry, and every atom/bond field. Descriptive strings that
are missing default to "".
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .model import Atom, Bond, MoleculeRecord


class MoleculeFormatError(ValueError):
    """Raised when a payload does not match the molecule record schema."""
    pass


class AtomPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    id: int
    element: str
    x2d: float
    y2d: float
    x3d: float
    y3d: float
    z3d: float
    lone_pairs: int = Field(alias='lonePairs')
    charge: int

    def to_atom(self) -> Atom:
        return Atom(
            id=self.id, element=self.element,
            x2d=self.x2d, y2d=self.y2d,
            x3d=self.x3d, y3d=self.y3d, z3d=self.z3d,
            lone_pairs=self.lone_pairs, charge=self.charge,
        )


class BondPayload(BaseModel):
    source: int = Field(description="Id of source atom")
    target: int = Field(description="Id of target atom")
    order: int = Field(description="1, 2, or 3")

    def to_bond(self) -> Bond:
        return Bond(source=self.source, target=self.target, order=self.order)


class MoleculePayload(BaseModel):
    """Complete molecule record as exchanged with the provider and the API."""
    model_config = ConfigDict(populate_by_name=True)

    formula: str
    name: str
    description: str = ""
    molecular_geometry: str = Field(alias='molecularGeometry')
    hybridization: str = ""
    resonance_info: str = Field("", alias='resonanceInfo')
    atoms: List[AtomPayload]
    bonds: List[BondPayload]

    def to_record(self) -> MoleculeRecord:
        return MoleculeRecord(
            formula=self.formula,
            name=self.name,
            description=self.description,
            molecular_geometry=self.molecular_geometry,
            hybridization=self.hybridization,
            resonance_info=self.resonance_info,
            atoms=tuple(a.to_atom() for a in self.atoms),
            bonds=tuple(b.to_bond() for b in self.bonds),
        )

    @classmethod
    def from_record(cls, record: MoleculeRecord) -> 'MoleculePayload':
        return cls(
            formula=record.formula,
            name=record.name,
            description=record.description,
            molecular_geometry=record.molecular_geometry,
            hybridization=record.hybridization,
            resonance_info=record.resonance_info,
            atoms=[
                AtomPayload(
                    id=a.id, element=a.element,
                    x2d=a.x2d, y2d=a.y2d, x3d=a.x3d, y3d=a.y3d, z3d=a.z3d,
                    lone_pairs=a.lone_pairs, charge=a.charge,
                )
                for a in record.atoms
            ],
            bonds=[BondPayload(source=b.source, target=b.target, order=b.order) for b in record.bonds],
        )


def parse_molecule(payload: Union[Dict[str, Any], str, bytes]) -> MoleculeRecord:
    """
    Validate a provider payload (dict or JSON text) into a MoleculeRecord.

    Raises:
    -------
    MoleculeFormatError
        If the JSON is invalid or required fields are missing/mistyped
    """
    try:
        if isinstance(payload, (str, bytes)):
            model = MoleculePayload.model_validate_json(payload)
        else:
            model = MoleculePayload.model_validate(payload)
    except ValidationError as e:
        raise MoleculeFormatError(f"Malformed molecule record: {e}") from e
    return model.to_record()


def molecule_to_payload(record: MoleculeRecord) -> Dict[str, Any]:
    """Wire-shaped dict (camelCase keys) for a record."""
    return MoleculePayload.from_record(record).model_dump(by_alias=True)


def load_molecule(path: Union[str, Path]) -> MoleculeRecord:
    """Read a molecule record from a JSON file."""
    text = Path(path).read_text(encoding='utf-8')
    return parse_molecule(text)


def dump_molecule(record: MoleculeRecord, indent: int = 2) -> str:
    return json.dumps(molecule_to_payload(record), indent=indent)
