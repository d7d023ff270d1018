"""Allow running the API as: python -m bandchart.api [--config path]."""

import argparse

from bandchart.api.runner import main

parser = argparse.ArgumentParser(description="Bollinger chart API server")
parser.add_argument("--config", default=None, help="Path to config.yaml")
args = parser.parse_args()
main(config_path=args.config)
