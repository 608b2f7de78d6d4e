from grading.rules.aero import run_aero_checks
from grading.rules.attachments import run_attachment_checks
from grading.rules.constraints import run_constraint_checks
from grading.rules.cost import run_recurring_cost_checks
from grading.rules.fuel import run_fuel_volume_checks
from grading.rules.landing_gear import run_landing_gear_checks
from grading.rules.mission import run_mission_checks
from grading.rules.stability import run_stability_checks
from grading.rules.thrust import run_thrust_checks

__all__ = [
    "run_aero_checks", "run_attachment_checks", "run_constraint_checks",
    "run_recurring_cost_checks", "run_fuel_volume_checks", "run_landing_gear_checks",
    "run_mission_checks", "run_stability_checks", "run_thrust_checks",
]
