"""
Central configuration for the matching-network synthesis engine.
Frequencies in MHz at the API boundary, everything else SI.
"""

# --- Physical constants ---
C_0 = 299792458.0                 # m/s, speed of light in vacuum

# --- Numerics ---
EPSILON = 1e-12                   # degeneracy floor for denominators and roots
SWR_OVERFLOW = float('inf')       # SWR reported for a total reflection (gamma >= 1)

# --- Defaults for a design request ---
DEFAULT_SOURCE_IMPEDANCE_OHMS = 50.0
DEFAULT_RELATIVE_PERMITTIVITY = 1.0

# --- Frequency sweep ---
SWEEP_START_FACTOR = 0.5          # sweep starts at f/2
SWEEP_STOP_FACTOR = 1.5           # sweep stops at 1.5 f
SWEEP_STEPS = 100                 # 100 steps -> 101 samples, both ends inclusive

# --- Recommendation heuristic ---
WIZARD_REACTANCE_TOL = 0.01       # ohm, |XL| below this counts as resistive
WIZARD_MATCH_TOL = 0.01           # ohm, |RL - Z0| below this counts as matched
WIZARD_HIGH_SWR = 10.0            # above this a single stub is preferred

# --- Microstrip ---
DEFAULT_SUBSTRATE_HEIGHT_MM = 1.6     # FR4
DEFAULT_SUBSTRATE_ER = 4.4            # FR4 relative permittivity
STUB_LINE_IMPEDANCE_OHMS = 50.0       # single-stub networks are laid out on a 50 ohm line
MICROSTRIP_WIDE_RATIO = 2.0           # W/h boundary between the two synthesis formulas
