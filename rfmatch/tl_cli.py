# rfmatch/tl_cli.py
import argparse
import logging
import os

from .config import DEFAULT_SOURCE_IMPEDANCE_OHMS, DEFAULT_SUBSTRATE_ER, DEFAULT_SUBSTRATE_HEIGHT_MM
from .tl_complex import Impedance
from .tl_core import DesignRequest, TopologyOptions
from .tl_errors import MatchingError
from .tl_lumped import lumped_element_match
from .tl_matching import quarter_wave_transform, single_stub_match
from .tl_microstrip import microstrip_layout
from .tl_sweep import frequency_response, sweep_to_frame
from .tl_validate import verify_design
from .tl_waveforms import plot_impedance_vs_freq, plot_swr_vs_freq
from .tl_wizard import recommend_network

logger = logging.getLogger(__name__)

def _print_design(design):
    if design.topology == 'quarter-wave':
        print(f'Z0={design.z0_ohms:.3f} ohm, lambda={design.wavelength_m*1e3:.3f} mm, '
              f'lambda/4={design.quarter_wave_length_m*1e3:.3f} mm')
    elif design.topology == 'lumped-element':
        for i, s in enumerate(design.solutions, 1):
            print(f'Solution {i}: B={s.B:.6g} S -> shunt {s.shunt.kind} {s.shunt.value:.4e} {s.shunt.unit}; '
                  f'X={s.X:.6g} ohm -> series {s.series.kind} {s.series.value:.4e} {s.series.unit}')
    else:
        for i, s in enumerate(design.solutions, 1):
            mark = '*' if i - 1 == design.optimal_index else ' '
            print(f'{mark}Solution {i}: d={s.distance_wavelengths:.4f} lambda ({s.distance_m*1e3:.3f} mm), '
                  f'l={s.stub_length_wavelengths:.4f} lambda ({s.stub_length_m*1e3:.3f} mm)')
        print(design.justification)

def main(argv=None):
    ap = argparse.ArgumentParser(description='Narrow-band impedance matching network synthesis.')
    ap.add_argument('--topology', choices=['quarter-wave','lumped','stub','wizard'], default='lumped')
    ap.add_argument('--RL', type=float, default=100.0, help='Load resistance (ohm).')
    ap.add_argument('--XL', type=float, default=0.0, help='Load reactance (ohm).')
    ap.add_argument('--f', type=float, default=1000.0, help='Design frequency (MHz).')
    ap.add_argument('--Z0', type=float, default=DEFAULT_SOURCE_IMPEDANCE_OHMS, help='Source impedance (ohm).')
    ap.add_argument('--er', type=float, default=1.0, help='Relative permittivity of the line.')
    ap.add_argument('--configuration', choices=['shunt-first','series-first'], default='shunt-first')
    ap.add_argument('--stub-config', choices=['shunt','series'], default='shunt')
    ap.add_argument('--stub-type', choices=['short','open'], default='short')
    ap.add_argument('--solution', type=int, default=None, help='1-based solution to sweep (default: first/optimal).')
    ap.add_argument('--microstrip', action='store_true', help='Print a microstrip layout (quarter-wave/stub).')
    ap.add_argument('--sub-h', type=float, default=DEFAULT_SUBSTRATE_HEIGHT_MM, help='Substrate height (mm).')
    ap.add_argument('--sub-er', type=float, default=DEFAULT_SUBSTRATE_ER, help='Substrate relative permittivity.')
    ap.add_argument('--plots_dir', default=None)
    ap.add_argument('--csv', default=None, help='Write the frequency sweep to this CSV file.')
    ap.add_argument('-v', '--verbose', action='store_true')
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    opts = TopologyOptions(configuration=args.configuration,
                           stub_configuration=args.stub_config, stub_type=args.stub_type)
    req = DesignRequest(Impedance(args.RL, args.XL), args.f, args.Z0, args.er, opts)
    index = None if args.solution is None else args.solution - 1

    try:
        if args.topology == 'wizard':
            rec = recommend_network(req)
            print(f'Recommended: {rec.network}' + (f' ({rec.configuration})' if rec.configuration else ''))
            if rec.z0_ohms is not None:
                print(f'Suggested Z0={rec.z0_ohms:.3f} ohm')
            print(rec.reason)
            return 0
        if args.topology == 'quarter-wave':
            design = quarter_wave_transform(req)
        elif args.topology == 'lumped':
            design = lumped_element_match(req)
        else:
            design = single_stub_match(req)

        _print_design(design)
        check = verify_design(design, index)
        print(f'At {req.frequency_mhz:g} MHz: Zin={check.zin} ohm, SWR={check.swr:.4f}')

        if args.microstrip and design.topology != 'lumped-element':
            lay = microstrip_layout(design, substrate_height_mm=args.sub_h,
                                    substrate_permittivity=args.sub_er, solution_index=index)
            print(f'Microstrip: Z0={lay.z0_ohms:.2f} ohm, W={lay.width_m*1e3:.3f} mm, e_eff={lay.effective_permittivity:.3f}')
            if lay.length_m is not None:
                print(f'  section length={lay.length_m*1e3:.3f} mm')
            else:
                print(f'  distance={lay.distance_m*1e3:.3f} mm, stub length={lay.stub_length_m*1e3:.3f} mm')
        elif args.microstrip:
            logger.warning('microstrip layout is not available for lumped element networks')

        points = frequency_response(design, index)
        if args.csv:
            sweep_to_frame(points).to_csv(args.csv, index=False)
            logger.info('sweep written to %s', args.csv)
        if args.plots_dir:
            os.makedirs(args.plots_dir, exist_ok=True)
            plot_swr_vs_freq(points, f'{args.plots_dir}/swr_vs_f.png')
            plot_impedance_vs_freq(points, f'{args.plots_dir}/zin_vs_f.png', z0=req.source_impedance_ohms)
            logger.info('plots written to %s', args.plots_dir)
    except MatchingError as e:
        logger.error('%s: %s', type(e).__name__, e)
        return 2
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
