import argparse
import logging
import sys
from pathlib import Path

from barchart.adapters.dom.document import Document, DocumentProbe
from barchart.adapters.fs.filestore import FileSystemStore
from barchart.adapters.render.mpl_renderer import MatplotlibRenderer
from barchart.adapters.render.svg_target import SvgRenderTarget
from barchart.app_shell.config import (
    CACHE_PATH,
    DATA_PATH,
    LOG_FORMAT,
    RULES_PATH,
    build_data_source,
    load_app_rules,
)
from barchart.components.chart import RenderInput, run_render
from barchart.rules.adapter import ChartRulesAdapter

logger = logging.getLogger("cli")


def handle_render(args: argparse.Namespace) -> int:
    try:
        rules = load_app_rules(Path(args.rules))
    except ValueError as e:
        logger.error(str(e))
        return 1
    rules_port = ChartRulesAdapter(rules)
    selector = rules_port.get_selector()

    try:
        data = build_data_source(args.data).get_data()
    except (OSError, ValueError) as e:
        logger.error(f"Could not load chart data: {e}")
        return 1

    # Headless page: one container of the requested width
    document = Document(viewport_height=args.viewport_height)
    document.add_element(selector.lstrip("#"), width=args.width)
    target = SvgRenderTarget(document)

    result = run_render(
        RenderInput(data=data),
        probe=DocumentProbe(document),
        target=target,
        rules=rules_port,
    )
    if result.skipped or result.scene is None:
        for err in result.errors:
            logger.error(f"{err.code}: {err.message}")
        return 1

    out = Path(args.out)
    fmt = args.format or ("png" if out.suffix.lower() == ".png" else "svg")
    if fmt == "svg":
        out.write_text(target.to_markup(selector), encoding="utf-8")
    else:
        renderer = MatplotlibRenderer(FileSystemStore(args.cache))
        out.write_bytes(renderer.render_scene(result.scene, fmt="png"))

    print(f"Wrote {len(result.scene.bars)}-bar chart ({result.scene.width}x{result.scene.height}) to {out}")
    return 0


def handle_show(args: argparse.Namespace) -> int:
    from barchart.ui.main import run_app

    run_app(rules_path=Path(args.rules), data_path=args.data, cache_path=args.cache)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Responsive bar chart")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to chart rules YAML")
    parser.add_argument("--data", default=DATA_PATH, help="JSON file of {name, count} records")
    parser.add_argument("--cache", default=CACHE_PATH, help="Directory for rendered images")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render
    render_parser = subparsers.add_parser("render", help="Write a chart snapshot")
    render_parser.add_argument("--width", type=int, default=600, help="Container width in px")
    render_parser.add_argument(
        "--viewport-height", type=int, default=800, help="Viewport height in px"
    )
    render_parser.add_argument("--format", choices=["svg", "png"], help="Defaults from --out suffix")
    render_parser.add_argument("--out", required=True, help="Output file")

    # show
    subparsers.add_parser("show", help="Open the responsive chart window")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    if args.command == "render":
        return handle_render(args)
    elif args.command == "show":
        return handle_show(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
