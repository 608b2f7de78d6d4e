"""
Feedback message catalog.

All literal feedback text and templates, grouped per rule module. Templates
use the %d / %f / %s grammar of grading.formatter. A JSON override only needs
the keys it changes; everything else keeps the stock English text.
"""

from pydantic import BaseModel, Field


class SummaryMessages(BaseModel):
    score: str = "Score: %d/10"
    cutout: str = "---- Automated design check complete; instructor review of the design report follows ----"
    invalid: str = "Invalid for analysis: Excel errors in Main sheet at %s. Correct the errors and resubmit."


class AeroMessages(BaseModel):
    thickness: str = "Aero tab: wing thickness ratio t/c = %.3f is outside the allowed %.2f to %.2f range. -1"
    cl_max: str = "Aero tab: takeoff CLmax = %.2f exceeds the high-lift limit of %.2f. -1"
    cd0: str = "Aero tab: CD0 in cell %s is %.4f, below the %.3f floor. Do not zero out parasite drag. -1"


class MissionMessages(BaseModel):
    between_altitude: str = (
        "Leg %d: Altitude must be between Leg %d and Leg %d "
        "(found alt%d=%.1f, alt%d=%.1f, alt%d=%.1f)"
    )
    between_mach: str = (
        "Leg %d: Mach must be between Leg %d and Leg %d "
        "(found mach%d=%.2f, mach%d=%.2f, mach%d=%.2f)"
    )
    afterburner: str = "Leg %d: AB must be %d (found AB=%.1f)"
    legs: dict[int, str] = Field(default_factory=lambda: {
        1: "Leg 1: Altitude must be 0 and AB = 100 (found alt=%.1f, AB=%.1f)",
        3: "Leg 3: Must be ≥35,000 ft, Mach = 0.9, AB = 0 (found alt=%.1f, mach=%.2f, AB=%.1f)",
        4: "Leg 4: Must be ≥35,000 ft, Mach = 0.9, AB = 0 (found alt=%.1f, mach=%.2f, AB=%.1f)",
        5: (
            "Leg 5: Must be ≥35,000 ft, Mach = Constraints block Supercruise Mach (cell U4), "
            "AB = 0, Distance ≥ 150 nm (found alt=%.1f, mach=%.2f, AB=%.1f, dist=%.1f)"
        ),
        6: "Leg 6: Must be 30,000 ft, Mach ≥ 1.2, AB = 100, Time ≥ 2 min (found alt=%.1f, mach=%.2f, AB=%.1f, time=%.2f)",
        7: (
            "Leg 7: Must be ≥35,000 ft, Mach = Constraints block Supercruise Mach (cell U4), "
            "AB = 0, Distance ≥ 150 nm (found alt=%.1f, mach=%.2f, AB=%.1f, dist=%.1f)"
        ),
        8: "Leg 8: Must be ≥35,000 ft, Mach = 0.9, AB = 0 (found alt=%.1f, mach=%.2f, AB=%.1f)",
        9: "Leg 9: Must be 10,000 ft, Mach = 0.4, AB = 0, Time = 20 min (found alt=%.1f, mach=%.2f, AB=%.1f, time=%.2f)",
    })
    summary: str = "Mission profile does not match the RFP mission. Check the legs listed above (no point deduction)."


class ThrustMessages(BaseModel):
    shortfall: str = "Thrust available is less than drag at %d mission leg station(s) on the Miss tab. -1"
    takeoff_roll: str = "Takeoff ground roll exceeds the takeoff distance required. -1"


class ConstraintMessages(BaseModel):
    radius_low: str = "Mission radius %.1f nm is below the %.0f nm threshold."
    radius_objective: str = "Mission radius %.1f nm meets the %.0f nm objective."
    payload_integer: str = "Payload counts for AIM-120 and AIM-9 must be integers."
    payload_low: str = "Payload of %d AIM-120 is below the %d missile threshold."
    payload_objective: str = "Payload of %d AIM-120 and %d AIM-9 meets the objective."
    mach_eq: str = "%s: Mach = %.2f, must be %.2f."
    mach_min: str = "%s: Mach = %.2f is below the %.2f threshold."
    mach_objective: str = "%s: meets the Mach %.2f objective (Mach = %.2f)."
    alt_eq: str = "%s: altitude = %.0f ft, must be %.0f ft."
    alt_min: str = "%s: altitude = %.0f ft is below the %.0f ft threshold."
    n_eq: str = "%s: load factor n = %.2f, must be %.2f."
    n_min: str = "%s: load factor n = %.2f is below the %.2f threshold."
    n_objective: str = "%s: meets the n = %.1f objective (n = %.2f)."
    ab_eq: str = "%s: AB = %.0f, must be %.0f."
    ps_eq: str = "%s: Ps = %.0f ft/s, must be %.0f ft/s."
    ps_min: str = "%s: Ps = %.0f ft/s is below the %.0f ft/s threshold."
    ps_objective: str = "%s: meets the Ps = %.0f ft/s objective (Ps = %.0f ft/s)."
    beta_eq: str = "%s: weight fraction beta should be %.3f (found %.3f)."
    cdx_eq: str = "%s: CDx = %.4f, must be %.4f."
    cdx_allowed: str = "%s: CDx = %.4f, must be one of %s."
    distance_high: dict[str, str] = Field(default_factory=lambda: {
        "Takeoff": "Takeoff distance %.0f ft exceeds the %.0f ft threshold.",
        "Landing": "Landing distance %.0f ft exceeds the %.0f ft threshold.",
    })
    distance_objective: dict[str, str] = Field(default_factory=lambda: {
        "Takeoff": "Takeoff distance %.0f ft meets the %.0f ft objective.",
        "Landing": "Landing distance %.0f ft meets the %.0f ft objective.",
    })
    curve_detail: dict[str, str] = Field(default_factory=lambda: {
        "Takeoff": "Takeoff: design T/W %.3f is below the required T/W %.3f at the design W/S.",
    })
    landing_curve: str = "Landing: design W/S %.1f exceeds the landing W/S limit of %.1f."
    curve_failure: str = "Design point falls below the constraint curve%s for: %s."
    curve_suffix_many: str = " Most constraints are violated; revisit the design point on the constraint diagram."
    curve_suffix_few: str = " Move the design point into the feasible region of the constraint diagram."
    summary: str = "Constraint table entries do not match the RFP requirements. -1"


class AttachmentMessages(BaseModel):
    pcs_x: str = "PCS is too far aft; at least 25% of its root chord must attach to the fuselage."
    vt_x: str = "VT is too far aft; at least 25% of its root chord must attach to the fuselage."
    pcs_z: str = "PCS vertical position is outside the fuselage height."
    vt_y: str = "VT is mounted outboard of the fuselage without overlapping the PCS or wing."
    strake: str = "Strake does not blend into the wing leading edge."
    aspect_ratio: str = "PCS aspect ratio (%.2f) should not exceed the wing aspect ratio (%.2f)."
    engine_clearance: str = "Engine diameter %.2f ft does not fit inside the fuselage cross-section (%.2f ft)."
    engine_protrusion: str = "Engine extends %.2f ft past the end of the fuselage."
    fuselage: str = "A component is located at or behind the end of the fuselage (length %.1f ft)."
    deduction: str = "Components are not properly attached to the aircraft. -1"


class StealthMessages(BaseModel):
    edge: str = (
        "Stealth shaping: %s %s edge (%.1f deg) is not aligned with the wing "
        "leading edge (%.1f deg) or trailing edge (%.1f deg)."
    )
    summary: str = "Planform edges are not aligned for signature reduction (no point deduction)."


class StabilityMessages(BaseModel):
    missing: str = "Stability derivatives are missing from the Main sheet (M10:Q10)."
    static_margin: str = "Static margin must be between %.2f and %.2f."
    static_margin_warning: str = "Warning: static margin is negative; the design relies on a flight control system."
    clb: str = "Cl_beta must be less than %f for roll stability."
    cnb: str = "Cn_beta must be greater than %f for yaw stability."
    ratio: str = "Cl_beta/Cn_beta ratio must be between %f and %f."
    deduction: str = "Aircraft is not adequately stable. -1"


class FuelMessages(BaseModel):
    capacity: str = "Fuel available (%.0f lb) exceeds fuel tank capacity (%.0f lb)."
    required: str = "Fuel required for the mission (%.0f lb) exceeds fuel available (%.0f lb)."
    volume: str = "Internal volume required (%.0f ft^3) exceeds volume available (%.0f ft^3)."
    deduction: str = "Fuel and volume requirements are not met. -1"


class CostMessages(BaseModel):
    ceiling: str = "Recurring cost of $%.1fM exceeds the $%.0fM ceiling. -1"
    objective: str = "Recurring cost of $%.1fM meets the $%.0fM objective."


class LandingGearMessages(BaseModel):
    nose: str = "Nose gear should carry between %f% and %f% of the aircraft weight."
    tipback: str = "Tip-back angle must be less than the limit angle."
    rollover: str = "Roll-over angle must be less than the limit angle."
    rotation: str = "Rotation speed must be less than %f kts."
    deduction: str = "Landing gear placement does not meet the requirements. -1"


class MessageCatalog(BaseModel):
    summary: SummaryMessages = Field(default_factory=SummaryMessages)
    aero: AeroMessages = Field(default_factory=AeroMessages)
    mission: MissionMessages = Field(default_factory=MissionMessages)
    thrust: ThrustMessages = Field(default_factory=ThrustMessages)
    constraint: ConstraintMessages = Field(default_factory=ConstraintMessages)
    attachment: AttachmentMessages = Field(default_factory=AttachmentMessages)
    stealth: StealthMessages = Field(default_factory=StealthMessages)
    stability: StabilityMessages = Field(default_factory=StabilityMessages)
    fuel: FuelMessages = Field(default_factory=FuelMessages)
    cost: CostMessages = Field(default_factory=CostMessages)
    gear: LandingGearMessages = Field(default_factory=LandingGearMessages)


DEFAULT_MESSAGES = MessageCatalog()
