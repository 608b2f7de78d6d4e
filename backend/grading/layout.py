"""
Workbook layout: every fixed cell the rule modules read, by name.

Rows and columns are 1-based. Component columns on the main sheet:
B wing, C PCS (horizontal tail), D strake, E canard, F inlet, G engine, H VT.
"""

from grading.cells import CellRef

MAIN = "main"
GEOM = "geom"
MISS = "miss"
CONSTS = "consts"
GEAR = "gear"
AERO = "aero"


# ---------- Aerodynamics tab ----------

WING_THICKNESS_RATIO = CellRef(AERO, "C5")
TAKEOFF_CL_MAX = CellRef(AERO, "C6")
CD0_ROW = 10
CD0_COLUMNS = range(3, 14)          # C..M, one Mach number per column


# ---------- Mission profile ----------

MISSION_LEG_COLUMNS = (11, 12, 13, 14, 16, 18, 19, 22, 23)
MISSION_ROWS = {
    "alt": 33,
    "mach": 35,
    "ab": 36,
    "dist": 38,
    "time": 39,
}
SUPERCRUISE_MACH = CellRef(MAIN, "U4")


# ---------- Thrust / takeoff ----------

THRUST_STATIONS = tuple(
    (CellRef(MISS, f"{col}48"), CellRef(MISS, f"{col}49"))   # (drag, thrust available)
    for col in "CDEFGHIJKLMN"
)
TAKEOFF_DISTANCE = CellRef(MAIN, "K38")
TAKEOFF_REQUIRED = CellRef(MAIN, "X12")


# ---------- Constraint block ----------

CONSTRAINT_COLUMNS = {
    "beta": 19,
    "alt": 20,
    "mach": 21,
    "n": 22,
    "ab": 23,
    "ps": 24,
    "cdx": 25,
}
MISSION_RADIUS = CellRef(MAIN, "Y37")
AIM120_COUNT = CellRef(MAIN, "AB3")
AIM9_COUNT = CellRef(MAIN, "AB4")
DESIGN_WING_LOADING = CellRef(MAIN, "P13")
DESIGN_THRUST_LOADING = CellRef(MAIN, "Q13")
WING_LOADING_AXIS_ROW = 22          # consts sheet
CURVE_COLUMNS = range(11, 32)       # K..AE
LANDING_WING_LOADING_LIMIT = CellRef(CONSTS, "L33")


# ---------- Fuel / volume ----------

FUEL_CAPACITY = CellRef(MAIN, "O15")
FUEL_REQUIRED = CellRef(MAIN, "O16")
FUEL_AVAILABLE = CellRef(MAIN, "O18")
VOLUME_AVAILABLE = CellRef(MAIN, "O20")
VOLUME_REQUIRED = CellRef(MAIN, "O21")


# ---------- Recurring cost ----------

RECURRING_COST = CellRef(MAIN, "AB8")


# ---------- Stability ----------

STATIC_MARGIN = CellRef(MAIN, "M10")
CL_BETA = CellRef(MAIN, "O10")
CN_BETA = CellRef(MAIN, "P10")
DERIVATIVE_RATIO = CellRef(MAIN, "Q10")


# ---------- Geometry / attachments ----------

FUSELAGE_LENGTH = CellRef(MAIN, "B32")
FUSELAGE_Z_CENTER = CellRef(MAIN, "D52")
FUSELAGE_WIDTH = CellRef(MAIN, "E52")
FUSELAGE_HEIGHT = CellRef(MAIN, "F52")

AREA_ROW = 18
ASPECT_RATIO_ROW = 19
X_ROW = 23
Y_ROW = 24
Z_ROW = 25

COMPONENT_COLUMNS = {
    "wing": 2,
    "pcs": 3,
    "strake": 4,
    "canard": 5,
    "inlet": 6,
    "vt": 8,
}

ENGINE_X = CellRef(MAIN, "G23")
ENGINE_DIAMETER = CellRef(MAIN, "G26")
ENGINE_LENGTH = CellRef(MAIN, "G27")

WING_ROOT_CHORD = CellRef(GEOM, "C7")
PCS_ROOT_CHORD = CellRef(GEOM, "C8")
VT_ROOT_CHORD = CellRef(GEOM, "C10")

WING_SWEEP = CellRef(GEOM, "K15")
STRAKE_BLEND_Y = CellRef(GEOM, "M152")
STRAKE_BLEND_X = CellRef(GEOM, "L155")
WING_APEX_X = CellRef(GEOM, "L38")

# planform corners, one row per surface:
# root LE (x, y), tip LE (x, y), tip TE (x, y), root TE (x, y) in columns B..I
PLANFORM_ROWS = {
    "wing": 40,
    "strake": 41,
    "pcs": 42,
    "canard": 43,
    "inlet": 44,
}


# ---------- Landing gear ----------

NOSE_LOAD_PERCENT = CellRef(GEAR, "J19")
TIPBACK_ANGLE = CellRef(GEAR, "L19")
TIPBACK_LIMIT = CellRef(GEAR, "L20")
ROLLOVER_ANGLE = CellRef(GEAR, "M19")
ROLLOVER_LIMIT = CellRef(GEAR, "M20")
ROTATION_SPEED = CellRef(GEAR, "N19")
