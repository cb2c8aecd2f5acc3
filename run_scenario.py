import argparse
import logging
import time

from wave_based_method import WaveBasedSimulator, reference_scenario, setup_logging


def main():
    parser = argparse.ArgumentParser(description="Wave-Based Method formula evaluation (reference scenario)")
    parser.add_argument('--freq', type=float, default=None, help='Frequency (Hz)')
    parser.add_argument('--sound-speed', type=float, default=None, help='Speed of sound (m/s)')
    parser.add_argument('--rho-air', type=float, default=None, help='Air density (kg/m^3)')
    parser.add_argument('--modes', type=int, nargs=2, metavar=('M', 'N'), default=None,
                        help='Room mode truncation orders')
    parser.add_argument('--plate-modes', type=int, nargs=2, metavar=('P', 'Q'), default=None,
                        help='Plate mode truncation orders')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar')
    parser.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args()

    setup_logging(getattr(logging, args.log_level))

    # 只覆盖命令行给出的参数
    physics_config = {}
    if args.freq is not None:
        physics_config['f'] = args.freq
    if args.sound_speed is not None:
        physics_config['c'] = args.sound_speed
    if args.rho_air is not None:
        physics_config['rho_air'] = args.rho_air

    mode_config = {}
    if args.modes:
        mode_config['M'], mode_config['N'] = args.modes
    if args.plate_modes:
        mode_config['P'], mode_config['Q'] = args.plate_modes

    print("Initializing parameters ... ")
    scenario = reference_scenario()
    print(scenario)

    simulator = WaveBasedSimulator(physics_config=physics_config, mode_config=mode_config)

    start_time = time.time()
    results = simulator.evaluate(scenario, progress=args.progress)
    elapsed = time.time() - start_time

    print(simulator.report(results))
    print(f"Evaluated {len(results)} formulas in {elapsed:.2f}s")


if __name__ == '__main__':
    main()
