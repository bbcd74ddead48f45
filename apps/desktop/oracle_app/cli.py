"""CLI entrypoints for the oracle desktop window, headless rendering, and diagnostics."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from oracle_core import AppConfig, ManualScheduler, OracleDisplay, build_doctor_payload, load_config
from oracle_core.logging_setup import configure_logging
from oracle_renderer import compose, get_palette


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _config(args: argparse.Namespace) -> AppConfig:
    return getattr(args, "config", None) or load_config()


def cmd_run(args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui(_config(args))


def cmd_render(args: argparse.Namespace) -> int:
    cfg = _config(args)
    frame_ms = 1000.0 / cfg.display.fps
    scheduler = ManualScheduler(frame_interval_ms=frame_ms)
    oracle = OracleDisplay(cfg, scheduler)
    palette = get_palette(args.palette or cfg.display.palette)

    oracle.driver.start()
    oracle.set_fortune(args.text if args.text is not None else cfg.reveal.fallback_fortune)

    images = []
    for _ in range(args.frames):
        scheduler.step()
        images.append(compose(oracle.frame, oracle.displayed_text, palette).convert("RGB"))
    oracle.stop()

    out = Path(args.out).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.suffix.lower() == ".gif" and len(images) > 1:
        images[0].save(out, save_all=True, append_images=images[1:], duration=int(frame_ms), loop=0)
    else:
        images[-1].save(out)

    _print_json(
        {
            "out": str(out),
            "frames": len(images),
            "clock": oracle.driver.clock.time,
            "displayed_text": oracle.displayed_text,
            "revealing": oracle.active,
        }
    )
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(_config(args)))
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oracle", description="Dithered oracle display and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run desktop window")
    run_cmd.set_defaults(func=cmd_run)

    render_cmd = sub.add_parser("render", help="Render frames headlessly to a GIF or PNG")
    render_cmd.add_argument("--text", default=None, help="Text to reveal (defaults to the fallback fortune)")
    render_cmd.add_argument("--frames", type=_positive_int, default=120)
    render_cmd.add_argument("--palette", default=None, help="Palette name override")
    render_cmd.add_argument("--out", default="oracle.gif", help="Output path (.gif animates, anything else keeps the last frame)")
    render_cmd.set_defaults(func=cmd_render)

    doctor_cmd = sub.add_parser("doctor", help="Print diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.config = load_config()
    configure_logging(keep_files=args.config.diagnostics.keep_log_files, console=False)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
