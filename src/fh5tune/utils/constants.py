"""Reference values and bounds shared across tune calculations."""

REFERENCE_WEIGHT_LBS: float = 3500.0
REFERENCE_FRONT_DISTRIBUTION: float = 0.55
REFERENCE_REAR_DISTRIBUTION: float = 0.45
MIN_FRONT_DISTRIBUTION: float = 0.40
MAX_FRONT_DISTRIBUTION: float = 0.65

MIN_TIRE_PRESSURE_PSI: float = 15.0
MAX_TIRE_PRESSURE_PSI: float = 40.0
MIN_BRAKE_PRESSURE: float = 80.0
MAX_BRAKE_PRESSURE: float = 140.0
MIN_ARB: float = 1.0
MAX_ARB: float = 65.0

MIN_GEAR_COUNT: int = 4
MAX_GEAR_COUNT: int = 10
DEFAULT_GEAR_COUNT: int = 6
MAX_ASSIST_LEVEL: int = 2

STOCK: str = "Stock"
