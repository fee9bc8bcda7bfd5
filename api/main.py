# api/main.py
"""
FastAPI backend for MoleculeCraft - exposes the molcraft engines as REST API.

Run with:
    python api/main.py
"""

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import List, Optional
import sys
from pathlib import Path

# Add project root and app directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'app'))

from molcraft.logging_config import setup_logging
from molcraft.planar import build_planar_scene, layout
from molcraft.scene import Circle, Segment, Text, flatten
from molcraft.schema import MoleculePayload
from molcraft.spatial import CylinderDescriptor, SpherePlacement, build_spatial_scene
from molcraft.viz.viz2d import lewis_svg

from services.molecule_service import (
    BLANK_FORMULA_ERROR,
    BUSY_ERROR,
    MoleculeService,
    RequestGate,
)

setup_logging()

app = FastAPI(
    title="MoleculeCraft API",
    description="Lewis structure layout and VSEPR geometry engine",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One outstanding generation request per server process
GATE = RequestGate()

_service: Optional[MoleculeService] = None


def get_molecule_service() -> MoleculeService:
    """Lazily built service (overridden in tests)."""
    global _service
    if _service is None:
        _service = MoleculeService()
    return _service


def get_request_gate() -> RequestGate:
    return GATE


# =============================================================================
# Request/Response Models
# =============================================================================

class GenerateRequest(BaseModel):
    """Formula to analyze."""
    formula: str = Field(..., description="Chemical formula, e.g. H2O")


class AtomPosition(BaseModel):
    id: int
    element: str
    x: float
    y: float


class SegmentData(BaseModel):
    """One bond strand."""
    key: Optional[str] = None
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float


class CircleData(BaseModel):
    """Atom disc, lone-pair dot or charge badge."""
    key: Optional[str] = None
    role: str
    cx: float
    cy: float
    r: float
    fill: str
    stroke: Optional[str] = None


class TextData(BaseModel):
    key: Optional[str] = None
    x: float
    y: float
    text: str
    color: str
    size: float


class LayoutResult(BaseModel):
    """Laid-out Lewis diagram in view-frame units (y down)."""
    viewbox: str
    scale: float
    atoms: List[AtomPosition]
    segments: List[SegmentData]
    circles: List[CircleData]
    texts: List[TextData]


class SphereData(BaseModel):
    atom_id: int
    element: str
    position: List[float]
    radius: float
    color: str
    label: Optional[str] = None


class CylinderData(BaseModel):
    """Bond strand: center, (x, y, z, w) orientation of the local +Y axis, length."""
    key: Optional[str] = None
    position: List[float]
    orientation: List[float]
    length: float
    radius: float
    color: str


class StructureResult(BaseModel):
    spheres: List[SphereData]
    cylinders: List[CylinderData]


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "MoleculeCraft API"}


@app.post("/api/layout", response_model=LayoutResult)
async def layout_molecule(
    molecule: MoleculePayload,
    show_lone_pairs: bool = Query(True),
    show_charges: bool = Query(True),
):
    """Normalize the 2D coordinates and return every drawable primitive."""
    record = molecule.to_record()
    result = layout(record.atoms, record.bonds)
    scene = build_planar_scene(result, show_lone_pairs, show_charges)

    segments, circles, texts = [], [], []
    for primitive in flatten(scene):
        if isinstance(primitive, Segment):
            segments.append(SegmentData(
                key=primitive.key,
                x1=primitive.start[0], y1=primitive.start[1],
                x2=primitive.end[0], y2=primitive.end[1],
                color=primitive.color, width=primitive.width,
            ))
        elif isinstance(primitive, Circle):
            circles.append(CircleData(
                key=primitive.key, role=primitive.role,
                cx=primitive.center[0], cy=primitive.center[1], r=primitive.radius,
                fill=primitive.fill, stroke=primitive.stroke,
            ))
        elif isinstance(primitive, Text):
            texts.append(TextData(
                key=primitive.key,
                x=primitive.position[0], y=primitive.position[1],
                text=primitive.text, color=primitive.color, size=primitive.size,
            ))

    return LayoutResult(
        viewbox=result.frame.viewbox,
        scale=result.scale,
        atoms=[AtomPosition(id=a.id, element=a.element, x=a.x, y=a.y) for a in result.atoms],
        segments=segments,
        circles=circles,
        texts=texts,
    )


@app.post("/api/structure", response_model=StructureResult)
async def structure_molecule(molecule: MoleculePayload, show_labels: bool = Query(True)):
    """Sphere and bond-cylinder placements for a 3D renderer."""
    record = molecule.to_record()
    scene = build_spatial_scene(record.atoms, record.bonds, show_labels=show_labels)

    spheres, cylinders = [], []
    for primitive in flatten(scene.root):
        if isinstance(primitive, SpherePlacement):
            spheres.append(SphereData(
                atom_id=primitive.atom_id, element=primitive.element,
                position=list(primitive.position), radius=primitive.radius,
                color=primitive.color, label=primitive.label,
            ))
        elif isinstance(primitive, CylinderDescriptor):
            cylinders.append(CylinderData(
                key=primitive.key,
                position=list(primitive.position),
                orientation=list(primitive.orientation),
                length=primitive.length, radius=primitive.radius, color=primitive.color,
            ))

    return StructureResult(spheres=spheres, cylinders=cylinders)


@app.post("/api/generate", response_model=MoleculePayload)
def generate_molecule(
    request: GenerateRequest,
    service: MoleculeService = Depends(get_molecule_service),
    gate: RequestGate = Depends(get_request_gate),
):
    """Ask the data provider for a molecule record."""
    if not request.formula.strip():
        raise HTTPException(status_code=400, detail=BLANK_FORMULA_ERROR)

    success, record, error = service.generate_gated(request.formula, gate)

    if not success:
        if error == BUSY_ERROR:
            raise HTTPException(status_code=409, detail=error)
        raise HTTPException(status_code=502, detail=error)

    return MoleculePayload.from_record(record)


@app.post("/api/export/svg")
async def export_svg(
    molecule: MoleculePayload,
    show_lone_pairs: bool = Query(True),
    show_charges: bool = Query(True),
):
    """Export the Lewis diagram as SVG."""
    record = molecule.to_record()
    svg = lewis_svg(layout(record.atoms, record.bonds), show_lone_pairs, show_charges)
    filename = f"{record.formula or 'molecule'}_lewis.svg"

    return StreamingResponse(
        iter([svg]),
        media_type="image/svg+xml",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
