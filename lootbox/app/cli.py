from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..items import ItemRarity, ItemType, parse_item_type, parse_rarity
from ..loot import LootManager, LootSettings
from ..sources import SOURCE_NAMES, ImagePixelSource

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lootbox",
        description="LootBox: generate a loot item and an image to go with it.",
    )
    parser.add_argument("--level", type=int, default=1, help="Item level (default: 1)")
    parser.add_argument(
        "--rarity",
        default=ItemRarity.Common.name,
        help="Item rarity (" + ", ".join(r.name for r in ItemRarity) + ")",
    )
    parser.add_argument(
        "--type",
        dest="item_type",
        default=ItemType.Potion.name,
        help="Item type (" + ", ".join(t.name for t in ItemType) + ")",
    )
    parser.add_argument("--image", metavar="PATH", help="Write the loot image to PATH")
    parser.add_argument("--width", type=int, help="Image width in pixels (default: $LOOTBOX_WIDTH or 24)")
    parser.add_argument("--height", type=int, help="Image height in pixels (default: $LOOTBOX_HEIGHT or 24)")
    parser.add_argument("--source", help="Pixel source (" + ", ".join(SOURCE_NAMES) + ")")
    parser.add_argument("--from-image", metavar="PATH", help="Use an existing picture as the pixel source")
    parser.add_argument(
        "--compress",
        action="store_true",
        help="Deflate the image data so standard PNG viewers can open it",
    )
    parser.add_argument("--list-sources", action="store_true", help="List pixel sources and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def list_sources() -> int:
    for name in SOURCE_NAMES:
        print(name)
    return 0


def build_settings(args: argparse.Namespace) -> LootSettings:
    settings = LootSettings.from_env()
    if args.width is not None:
        settings.width = args.width
    if args.height is not None:
        settings.height = args.height
    if args.source:
        settings.source = args.source.lower()
    if args.compress:
        settings.compress = True
    return settings


def run(args: argparse.Namespace) -> int:
    settings = build_settings(args)
    source = ImagePixelSource.from_path(args.from_image) if args.from_image else None
    manager = LootManager(settings=settings, source=source)
    item = manager.get_loot(
        args.level,
        rarity=parse_rarity(args.rarity),
        item_type=parse_item_type(args.item_type),
    )
    print(json.dumps(item.to_dict(), indent=2))
    if args.image:
        data = manager.generate_loot_image(item)
        Path(args.image).write_bytes(data)
        log.info("Wrote %s", args.image)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.list_sources:
        return list_sources()
    try:
        return run(args)
    except Exception as exc:
        log.debug("Loot generation failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
