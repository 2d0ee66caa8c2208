#!/usr/bin/env python3
"""Command line helper for letter templates and PDF exports.

``locate`` prints the template that would be used for a letter, ``render``
converts an HTML file to ``OUTPUT.pdf`` (keeping ``OUTPUT_asli`` on failure)
and ``pad-center`` previews the fixed-width centering helper.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from config import get_app_config
from logic import pdf_renderer
from logic.surat_export import TemplateLocator
from logic.text_layout import pad_center
from models.document import Orientation, PageSize


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Letter export helper")
    sub = ap.add_subparsers(dest="cmd", required=True)

    lo = sub.add_parser("locate", help="Print the template path for a letter")
    lo.add_argument("name")

    rn = sub.add_parser("render", help="Render an HTML file to PDF")
    rn.add_argument("html_file")
    rn.add_argument("output", help="Output path without the .pdf extension")
    rn.add_argument("--style", default=None)
    rn.add_argument(
        "--orientation", default="P", choices=[o.value for o in Orientation]
    )
    rn.add_argument("--page-size", default="A4", choices=[p.value for p in PageSize])

    pc = sub.add_parser("pad-center", help="Center text with padding")
    pc.add_argument("text")
    pc.add_argument("length", type=int)
    pc.add_argument("--padding", default=" ")

    args = ap.parse_args(argv)
    cfg = get_app_config()

    if args.cmd == "locate":
        path = TemplateLocator.from_config(cfg).resolve(args.name)
        if path is None:
            print(f"No template found for {args.name}", file=sys.stderr)
            return 1
        print(path)
    elif args.cmd == "render":
        html = Path(args.html_file).read_text(encoding="utf-8")
        result = pdf_renderer.render_html_to_pdf(
            html,
            args.output,
            args.style,
            args.orientation,
            args.page_size,
            cfg=cfg,
        )
        if not result.ok:
            print(result.diagnostic_echo(), file=sys.stderr)
            return 2
        print(result.pdf_path)
    elif args.cmd == "pad-center":
        print(f"[{pad_center(args.text, args.length, args.padding)}]")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
