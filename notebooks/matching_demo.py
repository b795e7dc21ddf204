from rfmatch import (
    Impedance, DesignRequest, TopologyOptions, swr,
    quarter_wave_transform, lumped_element_match, single_stub_match,
    frequency_response,
)

ZL = Impedance(100.0, 50.0)
print("SWR before:", swr(ZL, 50.0))

# lumped L-section, both roots
lumped = lumped_element_match(DesignRequest(ZL, 1000.0))
for s in lumped.solutions:
    print("L-section:", s.shunt.kind, s.shunt.value, "|", s.series.kind, s.series.value)

# single shunt short-circuited stub
stub = single_stub_match(DesignRequest(ZL, 1000.0, options=TopologyOptions(stub_configuration='shunt', stub_type='short')))
print("stub d:", stub.optimal.distance_wavelengths, "l:", stub.optimal.stub_length_wavelengths)
print(stub.justification)

# quarter-wave transformer needs a resistive load
q = quarter_wave_transform(DesignRequest(Impedance(100.0, 0.0), 1000.0))
print("lambda/4 Z0:", q.z0_ohms, "length (m):", q.quarter_wave_length_m)

band = frequency_response(stub)
print("min SWR over band:", min(p.swr for p in band))
