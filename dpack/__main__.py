# -*- coding: utf-8 -*-
"""
dpack CLI - Query, pack and install deployment artifacts.

Usage::

    python -m dpack list /srv/packages
    python -m dpack find /srv/packages --os-name ubuntu --first
    python -m dpack terms /srv/packages
    python -m dpack pack ./my-project --config dpack.yaml
    python -m dpack unpack proj~owner~main~1.0.0~3~linux~ubuntu~22.04~x64.tar.gz ./out
    python -m dpack upload /tmp/upload-1 proj~owner~main~1.0.0~3~linux~ubuntu~22.04~x64.tar.gz
    python -m dpack install proj~owner~main~1.0.0~3~linux~ubuntu~22.04~x64.tar.gz
    python -m dpack installed --install-root /opt/proj

Package, install and upload roots default to the paths resolved by
:mod:`dpack.catalog.resolver`.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-10-17
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dpack.catalog.catalog import PackageCatalog
from dpack.catalog.models import FACETS, PackageQuery
from dpack.catalog.query import terms
from dpack.catalog.resolver import (
    resolve_install_root,
    resolve_packages_root,
    resolve_uploads_root,
)
from dpack.core.builder import ArtifactBuilder
from dpack.core.config import BUILD_CONFIG_FILENAME, load_build_config, load_config
from dpack.core.installer import InstallResolver
from dpack.errors import DpackError


def _add_root(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        default=None,
        help="Directory of artifact files (default: resolved packages root).",
    )


def _add_facets(parser: argparse.ArgumentParser) -> None:
    for facet in FACETS:
        parser.add_argument(
            f"--{facet.replace('_', '-')}",
            dest=facet,
            default=None,
            help=f"Only match artifacts with this {facet}.",
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpack",
        description="dpack — Query, pack and install deployment artifacts.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List artifacts in catalog order.")
    _add_root(p)

    p = sub.add_parser("find", help="Find artifacts, newest first.")
    _add_root(p)
    _add_facets(p)
    p.add_argument(
        "--first", action="store_true", help="Only print the newest match."
    )

    p = sub.add_parser("terms", help="List distinct facet values.")
    _add_root(p)
    _add_facets(p)

    p = sub.add_parser("pack", help="Pack a project directory.")
    p.add_argument(
        "path", type=Path, nargs="?", default=Path("."),
        help="Project directory (default: current directory).",
    )
    p.add_argument("--name", default=None, help="Project name override.")
    p.add_argument(
        "--config", type=Path, default=None, dest="config_path",
        help=f"Build config YAML (default: <path>/{BUILD_CONFIG_FILENAME}).",
    )

    p = sub.add_parser("upload", help="Store an uploaded artifact in the uploads root.")
    p.add_argument("temp_file", type=Path, help="Uploaded file.")
    p.add_argument("filename", help="Artifact filename to store it as.")
    p.add_argument("--uploads-root", type=Path, default=None)

    p = sub.add_parser("unpack", help="Extract an artifact.")
    p.add_argument("archive", type=Path, help="Artifact file.")
    p.add_argument("destination", type=Path, help="Directory to extract into.")

    p = sub.add_parser("install", help="Extract an artifact into its version directory.")
    p.add_argument("archive", type=Path, help="Artifact file.")
    p.add_argument("--install-root", type=Path, default=None)

    p = sub.add_parser("installed", help="Print the latest installed version.")
    p.add_argument("--install-root", type=Path, default=None)
    p.add_argument("--version", default=None, dest="version")
    p.add_argument("--build", default=None, dest="build")

    return parser


def _query(args: argparse.Namespace) -> PackageQuery:
    return PackageQuery.from_mapping(
        {facet: getattr(args, facet, None) for facet in FACETS}
    )


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, load_config().log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command in ("list", "find", "terms"):
            catalog = PackageCatalog.scan(args.root or resolve_packages_root())
            if args.command == "list":
                for record in catalog:
                    print(record.full_path)
            elif args.command == "find":
                matches = catalog.find(_query(args))
                for record in matches[:1] if args.first else matches:
                    print(record.full_path)
            else:
                query = _query(args)
                index = catalog.terms() if query.is_empty() else terms(catalog.find(query))
                for entry in index:
                    for value, facet in entry.items():
                        print(f"{facet}\t{value}")

        elif args.command == "pack":
            config_path = args.config_path or args.path / BUILD_CONFIG_FILENAME
            output = ArtifactBuilder().pack(
                args.name, load_build_config(config_path), args.path
            )
            print(output)

        elif args.command == "upload":
            catalog = PackageCatalog(args.uploads_root or resolve_uploads_root())
            print(catalog.copy(args.temp_file, args.filename).full_path)

        elif args.command == "unpack":
            print(InstallResolver().unpack(args.archive, args.destination))

        elif args.command == "install":
            root = args.install_root or resolve_install_root()
            print(InstallResolver().install(args.archive, root))

        elif args.command == "installed":
            root = args.install_root or resolve_install_root()
            version = InstallResolver().get_installed(
                {"version": args.version, "build": args.build}, root
            )
            if version is not None:
                print(version)

    except (DpackError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
