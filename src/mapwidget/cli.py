# cli.py
import argparse, logging, sys
from jsonschema import ValidationError

from .config import ConfigError, RendererConfig, load_json
from .renderer import UnknownProviderError, render_page
from .utils.logger import get_logger


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="mapwidget")
    p.add_argument("--config")
    p.add_argument("--provider")
    p.add_argument("--api-key", dest="api_key")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("includes", help="print the provider's script include tags")

    r = sub.add_parser("render", help="print container + script for each map")
    r.add_argument("maps", nargs="+")

    pg = sub.add_parser("page", help="print a standalone HTML page")
    pg.add_argument("maps", nargs="+")
    pg.add_argument("--title", default="Map")

    pv = sub.add_parser("preview", help="write a PNG snapshot of one map")
    pv.add_argument("map")
    pv.add_argument("--out", required=True)
    pv.add_argument("--overlay", dest="preview_overlay", action="store_true", default=None)
    pv.add_argument("--tiles", dest="preview_tiles")
    return p.parse_args(argv)


def build_config(args) -> RendererConfig:
    cfg_dict = load_json(args.config)
    # JSON as defaults, CLI overrides
    for k in ("provider", "api_key", "preview_overlay", "preview_tiles"):
        v = getattr(args, k, None)
        if v is not None: cfg_dict[k] = v
    return RendererConfig.from_dict(cfg_dict)


def run(args) -> int:
    cfg = build_config(args)
    loader = cfg.build_loader()

    if args.command == "preview":
        from .preview import PreviewRenderer, TileOverlay
        overlay = TileOverlay(cfg.preview_tiles) if cfg.preview_overlay else None
        vp = PreviewRenderer(overlay).render(loader.load_map(args.map), args.out)
        print(f"{args.out}: zoom={vp.zoom} extent=({vp.xmin:.1f},{vp.ymin:.1f},{vp.xmax:.1f},{vp.ymax:.1f})")
        return 0

    renderer = cfg.build_renderer()
    if args.command == "includes":
        print(renderer.render_javascript_includes())
    elif args.command == "render":
        for m in loader.load_maps(args.maps):
            print(renderer.render(m))
    elif args.command == "page":
        print(render_page(renderer, loader.load_maps(args.maps), args.title), end="")
    return 0


def main(argv=None):
    args = parse_args(argv)
    get_logger("mapwidget", logging.DEBUG if args.verbose else None)
    try:
        return run(args)
    except (ConfigError, UnknownProviderError, ValidationError, FileNotFoundError) as e:
        print(f"mapwidget: {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
