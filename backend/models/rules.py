"""
Static rule configuration: tolerances, thresholds and the constraint table.

Every number a rule module compares against lives here so a rule-set revision
is a data change. The stock values are assembled in grading/specs.py.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator


# ---------- Constraint table ----------

class DistanceRequirement(BaseModel):
    cell: str                 # main-sheet address holding the computed distance (ft)
    threshold: float          # scored ceiling
    objective: float          # advisory objective


class ConstraintSpec(BaseModel):
    """One named row of the constraint block (MaxMach, Supercruise, ...)."""

    label: str
    row: int                  # 1-based main-sheet row

    mach_eq: Optional[float] = None
    mach_min: Optional[float] = None
    mach_obj: Optional[float] = None
    alt_eq: Optional[float] = None
    alt_min: Optional[float] = None
    n_eq: Optional[float] = None
    n_min: Optional[float] = None
    n_obj: Optional[float] = None
    ab_eq: Optional[float] = None
    ps_eq: Optional[float] = None
    ps_min: Optional[float] = None
    ps_obj: Optional[float] = None
    cdx_eq: Optional[float] = None
    cdx_allowed: Optional[list[float]] = None
    beta_eq: Optional[float] = None
    beta_default: bool = False

    curve_row: Optional[int] = None   # consts-sheet row with the T/W requirement curve
    distance: Optional[DistanceRequirement] = None

    @model_validator(mode="after")
    def _one_check_per_quantity(self):
        pairs = [
            ("mach_eq", "mach_min"),
            ("alt_eq", "alt_min"),
            ("n_eq", "n_min"),
            ("ps_eq", "ps_min"),
            ("cdx_eq", "cdx_allowed"),
            ("beta_eq", "beta_default"),
        ]
        for eq_field, range_field in pairs:
            range_value = getattr(self, range_field)
            if getattr(self, eq_field) is not None and range_value is not None and range_value is not False:
                raise ValueError(
                    f"{self.label}: {eq_field} and {range_field} are mutually exclusive"
                )
        for obj_field, min_field in (("mach_obj", "mach_min"), ("n_obj", "n_min"), ("ps_obj", "ps_min")):
            if getattr(self, obj_field) is not None and getattr(self, min_field) is None:
                raise ValueError(f"{self.label}: {obj_field} requires {min_field}")
        return self


class ConstraintTolerances(BaseModel):
    mach: float = 0.01
    altitude: float = 1.0
    load_factor: float = 0.05
    afterburner: float = 1.0
    specific_excess_power: float = 1.0
    beta: float = 0.02
    drag_index: float = 0.0001
    distance: float = 0.05
    payload_integer: float = 0.01


class ConstraintRules(BaseModel):
    specs: list[ConstraintSpec]
    tolerances: ConstraintTolerances = Field(default_factory=ConstraintTolerances)
    radius_min: float = 375.0           # nm
    radius_objective: float = 410.0
    aim120_min: int = 8
    aim9_objective: int = 2
    landing_limit_label: str = "Landing"
    many_curve_failures: int = 6        # above this the summary switches suffix


# ---------- Mission profile ----------

class MissionLeg(BaseModel):
    number: int
    alt_eq: Optional[float] = None
    alt_min: Optional[float] = None
    mach_eq: Optional[float] = None
    mach_min: Optional[float] = None
    mach_supercruise: bool = False      # mach must match the Supercruise constraint
    ab_eq: Optional[float] = None
    dist_min: Optional[float] = None
    time_eq: Optional[float] = None
    time_min: Optional[float] = None
    between_neighbors: bool = False     # altitude/mach bracketed by previous and next leg
    report: list[str] = Field(default_factory=list)   # values echoed in the message, in order


class MissionTolerances(BaseModel):
    altitude: float = 10.0
    mach: float = 0.05
    afterburner: float = 10.0
    time: float = 0.1
    distance: float = 0.5


class MissionRules(BaseModel):
    legs: list[MissionLeg]
    tolerances: MissionTolerances = Field(default_factory=MissionTolerances)


# ---------- Per-module thresholds ----------

class AeroRules(BaseModel):
    tc_min: float = 0.03
    tc_max: float = 0.10
    cl_max_limit: float = 1.6
    cd0_min: float = 0.005


class AttachmentRules(BaseModel):
    active_area: float = 1.0            # ft^2, below this a component is absent
    root_chord_fraction: float = 0.25
    strake_blend_margin: float = 0.5    # ft
    engine_protrusion: float = 0.5      # ft
    edge_tolerance_deg: float = 5.0


class StabilityRules(BaseModel):
    static_margin_min: float = -0.1
    static_margin_max: float = 0.11
    clb_max: float = -0.001
    cnb_min: float = 0.002
    ratio_min: float = -1.0
    ratio_max: float = -0.3


class FuelRules(BaseModel):
    volume_margin: float = 0.0          # ft^3 of slack allowed on required volume


class CostRules(BaseModel):
    ceiling: float = 115.0              # $M per aircraft
    objective: float = 100.0


class LandingGearRules(BaseModel):
    nose_load_min: float = 10.0         # percent of weight on the nose gear
    nose_load_max: float = 20.0
    rotation_speed_max: float = 200.0   # kts


class RuleConfig(BaseModel):
    constraints: ConstraintRules
    mission: MissionRules
    aero: AeroRules = Field(default_factory=AeroRules)
    attachments: AttachmentRules = Field(default_factory=AttachmentRules)
    stability: StabilityRules = Field(default_factory=StabilityRules)
    fuel: FuelRules = Field(default_factory=FuelRules)
    cost: CostRules = Field(default_factory=CostRules)
    gear: LandingGearRules = Field(default_factory=LandingGearRules)
    base_score: int = 10
