#!/usr/bin/env python3
"""Helper script to launch the FastAPI dev server with one command."""
from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path
from subprocess import TimeoutExpired

ROOT_DIR = Path(__file__).resolve().parents[1]
LOGGER = logging.getLogger(__name__)

logging.basicConfig(level=logging.INFO, format="%(message)s")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Lance le backend FastAPI de gestion des cartes grises en mode développement",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port sur lequel exposer l'API (défaut: 8000)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Adresse d'écoute d'uvicorn (défaut: 127.0.0.1)",
    )
    parser.add_argument(
        "--storage",
        choices=("memory", "file", "sqlite"),
        default=None,
        help="Stockage des véhicules (défaut: RC_STORAGE ou sqlite)",
    )
    parser.add_argument(
        "--template",
        default=None,
        help="Image de fond du certificat (défaut: RC_TEMPLATE_IMAGE)",
    )
    parser.add_argument(
        "--skip-tests",
        action="store_true",
        help="Ne pas exécuter pytest avant le lancement",
    )
    return parser.parse_args(argv)


def run_step(description: str, command: list[str], cwd: Path, env: dict[str, str] | None = None) -> None:
    LOGGER.info("➡️  %s : %s", description, " ".join(command))
    subprocess.run(command, cwd=str(cwd), check=True, env=env)


def build_env(args: argparse.Namespace) -> dict[str, str]:
    env = os.environ.copy()
    if args.storage:
        env["RC_STORAGE"] = args.storage
    if args.template:
        template = Path(args.template).expanduser().resolve()
        if not template.exists():
            raise SystemExit(f"Image de fond introuvable: {template}")
        env["RC_TEMPLATE_IMAGE"] = str(template)
    return env


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    env = build_env(args)

    if not args.skip_tests:
        run_step("Exécution des tests", [sys.executable, "-m", "pytest"], ROOT_DIR)

    command = [
        sys.executable,
        "-m",
        "uvicorn",
        "backend.app:app",
        "--reload",
        "--host",
        args.host,
        "--port",
        str(args.port),
    ]

    LOGGER.info("➡️  Lancement du backend FastAPI : %s", " ".join(command))

    process = subprocess.Popen(command, cwd=str(ROOT_DIR), env=env)
    try:
        return process.wait()
    except KeyboardInterrupt:
        LOGGER.info("⏹️  Arrêt du backend...")
        process.terminate()
        try:
            return process.wait(timeout=10)
        except TimeoutExpired:
            process.kill()
            return process.wait()


if __name__ == "__main__":
    raise SystemExit(main())
