from .tl_complex import (
    Impedance, add, subtract, multiply, divide, invert, magnitude
)
from .tl_errors import (
    MatchingError, InvalidInputError, UnsupportedLoadError,
    NoRealSolutionError, NumericDegeneracyError
)
from .tl_core import (
    DesignRequest, TopologyOptions, swr, wavelength, zin_at_distance
)
from .tl_network import ReactiveComponent
from .tl_lumped import (
    LumpedSolution, LumpedDesign,
    lumped_element_match, minimal_magnitude_solution
)
from .tl_matching import (
    QuarterWaveDesign, StubSolution, StubDesign,
    quarter_wave_transform, single_stub_match
)
from .tl_sweep import (
    SweepPoint, frequency_response, input_impedance, sweep_to_frame
)
from .tl_wizard import Recommendation, recommend_network
from .tl_microstrip import (
    MicrostripLayout, microstrip_width, microstrip_impedance, microstrip_layout
)
