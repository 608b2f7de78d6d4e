"""
Stock rule set: the RFP constraint table and mission profile.

CONSTRAINT_SPECS rows refer to the main-sheet constraint block; curve_row is
the consts-sheet row holding that constraint's T/W-vs-W/S curve.
"""

from models.rules import (
    ConstraintRules,
    ConstraintSpec,
    DistanceRequirement,
    MissionLeg,
    MissionRules,
    RuleConfig,
)


CONSTRAINT_SPECS = [
    ConstraintSpec(label="MaxMach", row=3, alt_min=35000, mach_min=2.0, mach_obj=2.2,
                   ab_eq=100, ps_eq=0, cdx_eq=0, beta_default=True, curve_row=23),
    ConstraintSpec(label="Supercruise", row=4, alt_min=35000, mach_min=1.5, mach_obj=1.8,
                   ab_eq=0, ps_eq=0, cdx_eq=0, beta_default=True, curve_row=24),
    ConstraintSpec(label="Combat Turn 1", row=6, mach_eq=1.2, alt_eq=30000, n_min=3.0, n_obj=4.0,
                   ab_eq=100, ps_eq=0, cdx_eq=0, beta_default=True, curve_row=26),
    ConstraintSpec(label="Combat Turn 2", row=7, mach_eq=0.9, alt_eq=10000, n_min=4.0, n_obj=4.5,
                   ab_eq=100, ps_eq=0, cdx_eq=0, beta_default=True, curve_row=27),
    ConstraintSpec(label="Ps1", row=8, mach_eq=1.15, alt_eq=30000, n_eq=1, ab_eq=100,
                   ps_min=400, ps_obj=500, cdx_eq=0, beta_default=True, curve_row=28),
    ConstraintSpec(label="Ps2", row=9, mach_eq=0.9, alt_eq=10000, n_eq=1, ab_eq=0,
                   ps_min=400, ps_obj=500, cdx_eq=0, beta_default=True, curve_row=29),
    ConstraintSpec(
        label="Takeoff",
        row=12,
        alt_eq=0,
        mach_eq=1.2,
        n_eq=0.03,
        ab_eq=100,
        beta_eq=1,
        cdx_allowed=[0, 0.035],
        curve_row=32,
        distance=DistanceRequirement(cell="X12", threshold=3000, objective=2500),
    ),
    ConstraintSpec(
        label="Landing",
        row=13,
        alt_eq=0,
        mach_eq=1.3,
        n_eq=0.5,
        ab_eq=0,
        beta_eq=1,
        cdx_allowed=[0, 0.045],
        distance=DistanceRequirement(cell="X13", threshold=5000, objective=3500),
    ),
]


MISSION_LEGS = [
    MissionLeg(number=1, alt_eq=0, ab_eq=100, report=["alt", "ab"]),
    MissionLeg(number=2, ab_eq=0, between_neighbors=True),
    MissionLeg(number=3, alt_min=35000, mach_eq=0.9, ab_eq=0, report=["alt", "mach", "ab"]),
    MissionLeg(number=4, alt_min=35000, mach_eq=0.9, ab_eq=0, report=["alt", "mach", "ab"]),
    MissionLeg(number=5, alt_min=35000, mach_supercruise=True, ab_eq=0, dist_min=150,
               report=["alt", "mach", "ab", "dist"]),
    MissionLeg(number=6, alt_eq=30000, mach_min=1.2, ab_eq=100, time_min=2,
               report=["alt", "mach", "ab", "time"]),
    MissionLeg(number=7, alt_min=35000, mach_supercruise=True, ab_eq=0, dist_min=150,
               report=["alt", "mach", "ab", "dist"]),
    MissionLeg(number=8, alt_min=35000, mach_eq=0.9, ab_eq=0, report=["alt", "mach", "ab"]),
    MissionLeg(number=9, alt_eq=10000, mach_eq=0.4, ab_eq=0, time_eq=20,
               report=["alt", "mach", "ab", "time"]),
]


DEFAULT_RULES = RuleConfig(
    constraints=ConstraintRules(specs=CONSTRAINT_SPECS),
    mission=MissionRules(legs=MISSION_LEGS),
)
