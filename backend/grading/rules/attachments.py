"""
Component attachment, geometry and stealth-shaping checks.

Every component check is gated on the component being present (planform area
at or above the activity threshold). Attachment/geometry problems share one
point; stealth shaping is advisory.

Stealth shaping compares planform edge angles, normalized to [0, 180), of each
active surface against the wing leading and trailing edges. An edge that is
not parallel to either is still accepted when the normal through its tip
crosses the centerline along the fuselage, since its return is masked there.
"""

import math
from typing import Optional

from grading import layout
from grading.cells import CellReader, is_finite
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import AttachmentRules, RuleConfig
from models.workbook import Workbook

Point = tuple[float, float]
Edge = tuple[Point, Point]

SURFACE_LABELS = {
    "strake": "Strake",
    "pcs": "PCS",
    "canard": "Canard",
    "inlet": "Inlet",
}


class _Components:
    def __init__(self, cells: CellReader, active_area: float):
        self.cells = cells
        self.active_area = active_area

    def _at(self, row: int, name: str) -> Optional[float]:
        return self.cells.number_at(layout.MAIN, row, layout.COMPONENT_COLUMNS[name])

    def active(self, name: str) -> bool:
        area = self._at(layout.AREA_ROW, name)
        return area is not None and area >= self.active_area

    def area(self, name):
        return self._at(layout.AREA_ROW, name)

    def aspect_ratio(self, name):
        return self._at(layout.ASPECT_RATIO_ROW, name)

    def x(self, name):
        return self._at(layout.X_ROW, name)

    def y(self, name):
        return self._at(layout.Y_ROW, name)

    def z(self, name):
        return self._at(layout.Z_ROW, name)


# ---------- Geometry helpers ----------

def _edge_angle(edge: Edge) -> float:
    (x0, y0), (x1, y1) = edge
    return math.degrees(math.atan2(y1 - y0, x1 - x0)) % 180.0


def _angle_gap(a: float, b: float) -> float:
    diff = abs(a - b) % 180.0
    return min(diff, 180.0 - diff)


def _tip_normal_hits_centerline(edge: Edge, fuselage_length: Optional[float]) -> bool:
    (rx, ry), (tx, ty) = edge
    dx, dy = tx - rx, ty - ry
    if fuselage_length is None or dx == 0:
        return False
    x_hit = tx + ty * dy / dx
    return 0 <= x_hit <= fuselage_length


def _planform_edges(cells: CellReader, name: str) -> dict[str, Optional[Edge]]:
    row = layout.PLANFORM_ROWS[name]
    c = cells.row_numbers(layout.GEOM, row, range(2, 10))   # B..I

    def edge(i0: int, i1: int) -> Optional[Edge]:
        coords = (c[i0], c[i0 + 1], c[i1], c[i1 + 1])
        if any(v is None or not math.isfinite(v) for v in coords):
            return None
        root, tip = (coords[0], coords[1]), (coords[2], coords[3])
        if root == tip:
            return None
        return root, tip

    return {"leading": edge(0, 2), "trailing": edge(6, 4)}


def _vt_hosted_by(components: _Components, cells: CellReader, host: str,
                  vt_x: float, vt_y: float, vt_chord: float) -> bool:
    """An outboard VT is attached when its root overlaps the host surface."""
    chord_ref = layout.PCS_ROOT_CHORD if host == "pcs" else layout.WING_ROOT_CHORD
    host_x = components.x(host)
    host_chord = cells.number(chord_ref)
    host_area = components.area(host)
    host_ar = components.aspect_ratio(host)
    if not all(is_finite(v) for v in (host_x, host_chord, host_area, host_ar)) or host_area < 0 or host_ar < 0:
        return False
    semispan = math.sqrt(host_ar * host_area) / 2
    overlap = min(vt_x + vt_chord, host_x + host_chord) - max(vt_x, host_x)
    return overlap > 0 and abs(vt_y) <= semispan


# ---------- Checks ----------

def _attachment_problems(cells: CellReader, components: _Components,
                         limits: AttachmentRules, messages: MessageCatalog) -> list[str]:
    text = messages.attachment
    problems: list[str] = []

    fuselage_length = cells.number(layout.FUSELAGE_LENGTH)
    fuse_z = cells.number(layout.FUSELAGE_Z_CENTER)
    fuse_width = cells.number(layout.FUSELAGE_WIDTH)
    fuse_height = cells.number(layout.FUSELAGE_HEIGHT)

    pcs_active = components.active("pcs")
    vt_active = components.active("vt")

    if pcs_active:
        pcs_x = components.x("pcs")
        pcs_chord = cells.number(layout.PCS_ROOT_CHORD)
        if (
            pcs_x is not None and pcs_chord is not None and fuselage_length is not None
            and pcs_x > fuselage_length - limits.root_chord_fraction * pcs_chord
        ):
            problems.append(text.pcs_x)

    vt_x = components.x("vt")
    vt_y = components.y("vt")
    vt_chord = cells.number(layout.VT_ROOT_CHORD)
    vt_outboard = (
        vt_active and vt_y is not None and fuse_width is not None and vt_y > fuse_width / 2
    )
    if vt_active and not vt_outboard:
        if (
            vt_x is not None and vt_chord is not None and fuselage_length is not None
            and vt_x > fuselage_length - limits.root_chord_fraction * vt_chord
        ):
            problems.append(text.vt_x)

    if pcs_active:
        pcs_z = components.z("pcs")
        if (
            pcs_z is not None and fuse_z is not None and fuse_height is not None
            and (pcs_z < fuse_z - fuse_height / 2 or pcs_z > fuse_z + fuse_height / 2)
        ):
            problems.append(text.pcs_z)

    if vt_outboard:
        hosts = (["pcs"] if pcs_active else []) + ["wing"]
        hosted = vt_x is not None and vt_chord is not None and any(
            _vt_hosted_by(components, cells, host, vt_x, vt_y, vt_chord) for host in hosts
        )
        if not hosted:
            problems.append(text.vt_y)

    if components.active("strake"):
        sweep = cells.number(layout.WING_SWEEP)
        y = cells.number(layout.STRAKE_BLEND_Y)
        strake = cells.number(layout.STRAKE_BLEND_X)
        apex = cells.number(layout.WING_APEX_X)
        if all(is_finite(v) for v in (sweep, y, strake, apex)):
            slope = math.tan(math.radians(90 - sweep))
            wing = y / slope + apex if slope != 0 else math.inf
            if not (wing < strake + limits.strake_blend_margin):
                problems.append(text.strake)

    if pcs_active:
        pcs_ar = components.aspect_ratio("pcs")
        wing_ar = components.aspect_ratio("wing")
        if pcs_ar is not None and wing_ar is not None and pcs_ar > wing_ar:
            problems.append(format_message(text.aspect_ratio, pcs_ar, wing_ar))

    engine_diameter = cells.number(layout.ENGINE_DIAMETER)
    if engine_diameter is not None and fuse_width is not None and fuse_height is not None:
        envelope = min(fuse_width, fuse_height)
        if engine_diameter > envelope:
            problems.append(format_message(text.engine_clearance, engine_diameter, envelope))

    engine_x = cells.number(layout.ENGINE_X)
    engine_length = cells.number(layout.ENGINE_LENGTH)
    if engine_x is not None and engine_length is not None and fuselage_length is not None:
        overhang = engine_x + engine_length - fuselage_length
        if overhang > limits.engine_protrusion:
            problems.append(format_message(text.engine_protrusion, overhang))

    if fuselage_length is not None:
        positions = [
            components.x(name) for name in layout.COMPONENT_COLUMNS if components.active(name)
        ]
        if any(x is not None and x >= fuselage_length for x in positions):
            problems.append(format_message(text.fuselage, fuselage_length))

    return problems


def _stealth_findings(cells: CellReader, components: _Components,
                      limits: AttachmentRules, messages: MessageCatalog) -> list[str]:
    if not components.active("wing"):
        return []
    wing = _planform_edges(cells, "wing")
    if wing["leading"] is None or wing["trailing"] is None:
        return []

    wing_le = _edge_angle(wing["leading"])
    wing_te = _edge_angle(wing["trailing"])
    fuselage_length = cells.number(layout.FUSELAGE_LENGTH)
    findings: list[str] = []

    for name, label in SURFACE_LABELS.items():
        if not components.active(name):
            continue
        for edge_name, edge in _planform_edges(cells, name).items():
            if edge is None:
                continue
            angle = _edge_angle(edge)
            aligned = min(_angle_gap(angle, wing_le), _angle_gap(angle, wing_te)) <= limits.edge_tolerance_deg
            if aligned or _tip_normal_hits_centerline(edge, fuselage_length):
                continue
            findings.append(format_message(messages.stealth.edge, label, edge_name, angle, wing_le, wing_te))

    return findings


def run_attachment_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    cells = CellReader(workbook)
    limits = rules.attachments
    components = _Components(cells, limits.active_area)

    feedback = _attachment_problems(cells, components, limits, messages)
    delta = 0
    if feedback:
        feedback.append(messages.attachment.deduction)
        delta = -1

    stealth = _stealth_findings(cells, components, limits, messages)
    if stealth:
        feedback.extend(stealth)
        feedback.append(messages.stealth.summary)

    return RuleResult(delta=delta, feedback=tuple(feedback))
