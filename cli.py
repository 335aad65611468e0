#!/usr/bin/env python
"""
Command-line interface for the zoning IFC exporter

Reads editor state saved as JSON and writes an IFC4 file.

Usage:
    python cli.py export --input project.json --output model.ifc
    python cli.py batch --input ./projects/ --output ./ifc/
"""

import os
import sys
import json
import argparse
from typing import Any, Dict, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from loguru import logger
from pydantic import ValidationError

from zoning_ifc import IfcExportPipeline, IfcExportError
from zoning_ifc.encoder import IfcDocument


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def detect_mode(state: Dict[str, Any], requested: Optional[str] = None) -> str:
    """District when the editor was in the district module, comparison otherwise"""
    if requested and requested != "auto":
        return requested
    if state.get("activeModule") == "district":
        return "district"
    if "existing" in state and "proposed" in state:
        return "comparison"
    if state.get("entities", {}).get("lots"):
        return "district"
    return "comparison"


def export_state(
    state: Dict[str, Any],
    mode: str,
    filename: str,
    lot_spacing: Optional[float] = None
) -> IfcDocument:
    """Run the matching export for a saved editor state"""
    if lot_spacing is None:
        lot_spacing = (state.get("layoutSettings") or {}).get("lotSpacing")
    options = {"filename": filename, "lotSpacing": lot_spacing}

    pipeline = IfcExportPipeline()
    if mode == "district":
        lots = state.get("entities", {}).get("lots", {})
        order = state.get("entityOrder") or list(lots.keys())
        return pipeline.export_district(lots, order, options)
    return pipeline.export_comparison(state["existing"], state["proposed"], options)


def write_document(document: IfcDocument, output_path: str):
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    with open(output_path, "w", encoding="ascii", newline="\n") as f:
        f.write(document.text)


def cmd_export(args):
    """Export a single saved state"""
    setup_logging(args.verbose)

    if not os.path.exists(args.input):
        logger.error(f"Input file not found: {args.input}")
        return 1

    with open(args.input, "r", encoding="utf-8") as f:
        state = json.load(f)

    mode = detect_mode(state, args.mode)
    output_path = args.output or os.path.splitext(args.input)[0] + ".ifc"

    try:
        document = export_state(state, mode, os.path.basename(output_path), args.lot_spacing)
    except (IfcExportError, ValidationError, KeyError) as e:
        logger.error(f"Failed to export {args.input}: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    write_document(document, output_path)
    logger.info(f"✓ Generated: {output_path}")
    logger.info(f"  Mode: {mode}")
    logger.info(f"  Entities: {document.entity_count}")

    if args.summary:
        summary = {
            "file": output_path,
            "mode": mode,
            "entity_count": document.entity_count,
            "types": document.type_counts,
        }
        print(json.dumps(summary, indent=2))

    return 0


def cmd_batch(args):
    """Export every saved state (*.json) in a directory"""
    setup_logging(args.verbose)

    if not os.path.isdir(args.input):
        logger.error(f"Input directory not found: {args.input}")
        return 1

    inputs = sorted(name for name in os.listdir(args.input) if name.lower().endswith(".json"))
    if not inputs:
        logger.error(f"No JSON files found in {args.input}")
        return 1

    os.makedirs(args.output, exist_ok=True)
    logger.info(f"Processing {len(inputs)} files...")

    success = 0
    failed = 0

    for i, name in enumerate(inputs, 1):
        input_path = os.path.join(args.input, name)
        output_path = os.path.join(args.output, os.path.splitext(name)[0] + ".ifc")
        logger.info(f"[{i}/{len(inputs)}] {name}")

        try:
            with open(input_path, "r", encoding="utf-8") as f:
                state = json.load(f)
            mode = detect_mode(state, args.mode)
            document = export_state(state, mode, os.path.basename(output_path), args.lot_spacing)
        except (IfcExportError, ValidationError, KeyError, json.JSONDecodeError) as e:
            logger.error(f"  ✗ Failed: {e}")
            failed += 1
            continue

        write_document(document, output_path)
        logger.info(f"  ✓ {os.path.basename(output_path)} ({document.entity_count} entities)")
        success += 1

    logger.info(f"\nComplete: {success} succeeded, {failed} failed")
    return 0 if failed == 0 else 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Zoning IFC Exporter CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Export a saved project:
    python cli.py export --input project.json --output zoning-model.ifc

  Force district mode with custom spacing:
    python cli.py export --input project.json --mode district --lot-spacing 20

  Batch export a directory:
    python cli.py batch --input ./projects/ --output ./ifc/
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Export command
    export_parser = subparsers.add_parser("export", help="Export one saved editor state")
    export_parser.add_argument("--input", "-i", required=True, help="Editor state JSON file")
    export_parser.add_argument("--output", "-o", help="Output IFC file (default: input name with .ifc)")
    export_parser.add_argument("--mode", choices=["auto", "comparison", "district"], default="auto",
                               help="Export mode (default: from activeModule)")
    export_parser.add_argument("--lot-spacing", type=float, help="Spacing between lots in feet")
    export_parser.add_argument("--summary", "-s", action="store_true", help="Print summary to stdout")
    export_parser.set_defaults(func=cmd_export)

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Export every state JSON in a directory")
    batch_parser.add_argument("--input", "-i", required=True, help="Directory of editor state JSON files")
    batch_parser.add_argument("--output", "-o", default="output", help="Output directory")
    batch_parser.add_argument("--mode", choices=["auto", "comparison", "district"], default="auto",
                              help="Export mode (default: from activeModule)")
    batch_parser.add_argument("--lot-spacing", type=float, help="Spacing between lots in feet")
    batch_parser.set_defaults(func=cmd_batch)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
