# Headless runner: stir a dye/heat source at the grid centre and report stats.
# python -m stable_fluids --size 64 --frames 120 --preset smoke

import argparse

from . import diagnostics
from .brush import splat
from .fluid import Fluid
from .log import enable
from .params import PRESETS, Params, SliderSettings, StepConfig, apply_preset


def build_parser():
    parser = argparse.ArgumentParser(prog="stable_fluids", description="Run the fluid solver headless and print field statistics.")
    parser.add_argument("--size", type=int, default=64, help="interior cells per side")
    parser.add_argument("--frames", type=int, default=120)
    parser.add_argument("--dt", type=float, default=0.1)
    parser.add_argument("--preset", choices=sorted(PRESETS), default="fluid")
    parser.add_argument("--iterations", type=int, default=8)
    parser.add_argument("--burn-rate", type=float, default=0.0)
    parser.add_argument("--radius", type=int, default=3, help="brush radius in cells")
    parser.add_argument("--report-every", type=int, default=20)
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def run(args):
    if args.debug:
        enable(True)

    settings = apply_preset(SliderSettings(brush_radius=args.radius), args.preset)
    try:
        params = Params(n=args.size, dt=args.dt, diffusion=settings.diffusion,
                        viscosity=settings.physical_viscosity())
        config = StepConfig.from_sliders(settings, iterations=args.iterations,
                                         burn_rate=args.burn_rate).validate()
    except ValueError as e:
        raise SystemExit(f"[ERROR] {e}")

    fluid = Fluid(params)
    cx = cy = args.size // 2 + 1
    heat = config.buoyancy > 0.0
    dye = settings.physical_dye()
    push = settings.physical_force()

    print(f"[*] {args.preset}: {args.size}x{args.size} grid, {args.frames} frames, {config}")
    for _ in range(args.frames):
        splat(fluid, cx, cy, settings.brush_radius, dye=dye, force=(0.0, -push), heat=heat)
        fluid.step(config)
        if args.report_every > 0 and fluid.frame % args.report_every == 0:
            s = diagnostics.summary(fluid)
            print(f"[i] frame {s['frame']:5d}  density={s['density']:.1f}  "
                  f"energy={s['energy']:.4f}  max|div|={s['divergence']:.3e}")

    stats = diagnostics.summary(fluid)
    if not stats["finite"]:
        raise SystemExit("[ERROR] simulation produced non-finite values")
    print(f"[OK] {fluid.frame} frames, total density {stats['density']:.1f}")
    return stats


def main(argv=None):
    run(build_parser().parse_args(argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
