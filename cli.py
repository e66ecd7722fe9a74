#!/usr/bin/env python
"""
PL Temperature-Sweep Simulator CLI
==================================
Usage:  python cli.py <command> [options]
"""

import sys, os, argparse, dataclasses, logging

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

logger = logging.getLogger('cli')


# ── helpers ──────────────────────────────────────────────────────────────
def _header(title):
    print(f"\n{'='*50}")
    print(f"  {title}")
    print(f"{'='*50}\n")


def _setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def _material_from_args(args):
    """Named material with optional --eg0/--alpha/--beta overrides."""
    from materials import get_material

    mat = get_material(args.material)
    overrides = {k: v for k, v in (('Eg0', args.eg0), ('alpha', args.alpha),
                                   ('beta', args.beta)) if v is not None}
    if overrides:
        mat = dataclasses.replace(mat, name=f'{mat.name} (modified)', **overrides)
    return mat


def _config_from_args(args):
    """Preset with per-field overrides from the command line."""
    from simulation.config import SimulationConfig

    cfg = SimulationConfig.from_preset(args.preset)
    mapping = {
        'T_min': args.tmin, 'T_max': args.tmax, 'steps': args.steps,
        'peak_fwhm': args.fwhm, 'amplitude': args.amplitude,
        'instrument_resolution': args.instrument,
        'window_half_width': args.window, 'resolution': args.resolution,
    }
    overrides = {k: v for k, v in mapping.items() if v is not None}
    if args.strict:
        overrides['strict_bandgap'] = True
    if overrides:
        cfg = dataclasses.replace(cfg, **overrides)
    return cfg


# ── commands ─────────────────────────────────────────────────────────────

def cmd_materials(args):
    """List all materials with their Varshni parameters."""
    from materials import get_material, list_materials
    from physics.bandgap import bandgap_varshni

    _header("MATERIALS")
    print(f"  {'Key':16s} {'Eg0 (eV)':>9s} {'alpha (eV/K)':>13s} {'beta (K)':>9s} {'Eg300 (eV)':>11s}")
    for key in list_materials():
        mat = get_material(key)
        print(f"  {key:16s} {mat.Eg0:9.4f} {mat.alpha:13.3e} {mat.beta:9.1f} "
              f"{bandgap_varshni(300.0, mat):11.4f}")


def cmd_bandgap(args):
    """Tabulate Eg(T) for one material."""
    from physics.bandgap import bandgap_varshni, bandgap_shift
    from utils.constants import eV_to_nm, thermal_energy_eV

    mat = _material_from_args(args)
    temps = args.temperatures or [0, 50, 100, 150, 200, 250, 300, 350, 400]

    _header(f"BANDGAP: {mat.name}")
    print(f"  {'T (K)':>8}  {'Eg (eV)':>10}  {'lambda (nm)':>11}  {'kT (meV)':>9}")
    print(f"  {'-'*8}  {'-'*10}  {'-'*11}  {'-'*9}")
    for T in temps:
        E_g = bandgap_varshni(T, mat, strict=args.strict)
        print(f"  {T:8.1f}  {E_g:10.5f}  {float(eV_to_nm(E_g)):11.1f}  "
              f"{thermal_energy_eV(T)*1e3:9.2f}")
    shift = bandgap_shift(mat, temps[0], temps[-1])
    print(f"\n  Shift {temps[0]:g} K -> {temps[-1]:g} K: {shift*1e3:+.2f} meV")


def cmd_spectrum(args):
    """Single spectrum at one temperature."""
    from physics.pl_spectrum import generate_spectrum
    from simulation.analysis import peak_energy, measure_fwhm
    from simulation.export import sweep_to_csv

    mat = _material_from_args(args)
    cfg = _config_from_args(args)
    s = generate_spectrum(args.temperature, mat, cfg)

    if args.csv:
        sys.stdout.write(sweep_to_csv([s], layout=args.csv))
        return

    _header(f"PL SPECTRUM @ {s.temperature:g} K")
    print(f"  Material:      {mat}")
    print(f"  Config:        {cfg}")
    print(f"  Eg:            {s.Eg:.5f} eV")
    print(f"  Peak energy:   {peak_energy(s):.5f} eV")
    print(f"  Measured FWHM: {measure_fwhm(s)*1e3:.2f} meV "
          f"(effective {cfg.effective_fwhm()*1e3:.2f} meV)")
    print(f"  Energy axis:   {s.energies[0]:.4f} .. {s.energies[-1]:.4f} eV, {len(s)} points")


def cmd_sweep(args):
    """Run a temperature sweep and tabulate / export it."""
    from simulation.sweep import run_temperature_sweep
    from simulation.analysis import peak_energy, measure_fwhm, summarize_sweep
    from simulation.export import sweep_to_csv, bandgap_to_csv

    mat = _material_from_args(args)
    cfg = _config_from_args(args)
    spectra = run_temperature_sweep(mat, cfg)

    if args.csv == 'bandgap':
        sys.stdout.write(bandgap_to_csv(spectra))
        return
    if args.csv:
        sys.stdout.write(sweep_to_csv(spectra, layout=args.csv))
        return

    _header(f"TEMPERATURE SWEEP ({cfg.preset_name or 'custom'})")
    print(f"  Material: {mat}")
    print(f"  Config:   {cfg}\n")
    print(f"  {'T (K)':>8}  {'Eg (eV)':>10}  {'Peak (eV)':>10}  {'FWHM (meV)':>10}")
    print(f"  {'-'*8}  {'-'*10}  {'-'*10}  {'-'*10}")
    for s in spectra:
        print(f"  {s.temperature:8.2f}  {s.Eg:10.5f}  {peak_energy(s):10.5f}  "
              f"{measure_fwhm(s)*1e3:10.2f}")

    print()
    for k, v in summarize_sweep(spectra).items():
        print(f"  {k:24s}  {v:.6g}" if isinstance(v, float) else f"  {k:24s}  {v}")


def cmd_plot(args):
    """Render sweep figures to an image file."""
    from simulation.session import SweepSession
    from simulation import plots

    mat = _material_from_args(args)
    cfg = _config_from_args(args)
    session = SweepSession(mat, cfg, label=args.kind)
    spectra = session.run()

    if args.kind == 'bandgap':
        fig = plots.plot_bandgap_vs_temperature(spectra)
    elif args.kind == 'spectrum':
        target = args.temperature if args.temperature is not None else cfg.T_min
        fig = plots.plot_spectrum(session.nearest(target))
    else:
        fig = plots.plot_sweep_overview(spectra)

    out = args.output or f'pl_{args.kind}.png'
    fig.savefig(out, dpi=150, bbox_inches='tight')
    plots.plt.close(fig)
    print(f"  Saved: {out}")


def cmd_presets(args):
    """List or inspect available presets."""
    from simulation.config import SimulationConfig

    if args.name:
        _header(f"PRESET: {args.name}")
        print(SimulationConfig.from_preset(args.name).to_json())
    else:
        _header("AVAILABLE PRESETS")
        for name in SimulationConfig.list_presets():
            cfg = SimulationConfig.from_preset(name)
            print(f"  {name:14s}  {cfg.description or '(no description)'}")


# ── parser ───────────────────────────────────────────────────────────────

def _add_material_args(p):
    p.add_argument('--material', default='Perovskite', help='Material key')
    p.add_argument('--eg0', type=float, help='Override Eg0 (eV)')
    p.add_argument('--alpha', type=float, help='Override Varshni alpha (eV/K)')
    p.add_argument('--beta', type=float, help='Override Varshni beta (K)')
    p.add_argument('--strict', action='store_true',
                   help='Reject T + beta ~ 0 instead of returning inf/nan')


def _add_config_args(p):
    p.add_argument('--preset', default='default', help='Config preset name')
    p.add_argument('--tmin', type=float, help='Override T_min (K)')
    p.add_argument('--tmax', type=float, help='Override T_max (K)')
    p.add_argument('--steps', type=int, help='Override number of steps')
    p.add_argument('--fwhm', type=float, help='Override peak FWHM (eV)')
    p.add_argument('--amplitude', type=float, help='Override peak amplitude')
    p.add_argument('--instrument', type=float, help='Instrument resolution (eV)')
    p.add_argument('--window', type=float, help='Energy window half-width (eV)')
    p.add_argument('--resolution', type=int, help='Points per spectrum')


def build_parser():
    p = argparse.ArgumentParser(
        prog='plsim',
        description='PL Temperature-Sweep Simulator CLI (Varshni + Gaussian line)')
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    sub = p.add_subparsers(dest='command', help='command')

    # materials
    sub.add_parser('materials', help='List materials')

    # bandgap
    b = sub.add_parser('bandgap', help='Tabulate Eg(T)')
    b.add_argument('temperatures', nargs='*', type=float, help='Temperatures (K)')
    _add_material_args(b)

    # spectrum
    s = sub.add_parser('spectrum', help='Single spectrum at one temperature')
    s.add_argument('-T', '--temperature', type=float, default=300.0)
    s.add_argument('--csv', choices=['long', 'pairs'], help='Print CSV instead')
    _add_material_args(s)
    _add_config_args(s)

    # sweep
    sw = sub.add_parser('sweep', help='Run a temperature sweep')
    sw.add_argument('--csv', choices=['long', 'pairs', 'bandgap'],
                    help='Print CSV instead of the table')
    _add_material_args(sw)
    _add_config_args(sw)

    # plot
    pl = sub.add_parser('plot', help='Render sweep figures')
    pl.add_argument('--kind', choices=['overview', 'bandgap', 'spectrum'],
                    default='overview')
    pl.add_argument('-T', '--temperature', type=float,
                    help='Temperature of the spectrum plot (nearest step)')
    pl.add_argument('-o', '--output', help='Image path')
    _add_material_args(pl)
    _add_config_args(pl)

    # presets
    ps = sub.add_parser('presets', help='List/inspect presets')
    ps.add_argument('name', nargs='?', help='Preset to inspect')

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    commands = {
        'materials': cmd_materials,
        'bandgap':   cmd_bandgap,
        'spectrum':  cmd_spectrum,
        'sweep':     cmd_sweep,
        'plot':      cmd_plot,
        'presets':   cmd_presets,
    }

    if args.command not in commands:
        parser.print_help()
        return 0

    from physics.errors import DomainError
    try:
        commands[args.command](args)
    except DomainError as e:
        logger.debug("Rejected configuration field %s", e.field)
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (KeyError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
