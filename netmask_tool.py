"""Prefix length / netmask converter.

Usage:
    python netmask_tool.py [-config tool.yaml] [-family ipv4|ipv6] [-debug] VALUE...

Each VALUE is a prefix length ('24', '/24') or an IPv4 netmask ('255.255.255.0').
One line is printed per value:

    /24 255.255.255.0 0.0.0.255 256
"""

import argparse
import logging
import os
import re
import sys
from typing import Any, Dict, List, Optional

import yaml

from log_setup import configure_debug, configure_run_logging
from ip_prefix import FAMILIES, Prefix, ValidationError
from ip_prefix import prefix32

DEFAULT_CONFIG: Dict[str, Any] = {
    "run": {"debug": False, "log_dir": None},
    "output": {"family": "ipv4"},
}

# ASCII digits only; three are enough for any supported width
_LENGTH_RE = re.compile(r"/?([0-9]{1,3})")


def _require_dict(d: Any, path: str) -> Dict[str, Any]:
    if not isinstance(d, dict):
        raise ValueError(f"Expected mapping at '{path}', got {type(d).__name__}")
    return d


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    return _require_dict(data, "/")


def _resolve_yaml_arg(arg: str) -> str:
    if not isinstance(arg, str) or not arg:
        raise ValueError("config argument must be a non-empty string")
    if not arg.lower().endswith((".yaml", ".yml")):
        raise ValueError("Config argument must be a YAML file path")
    candidate = os.path.abspath(arg)
    if not os.path.exists(candidate):
        raise FileNotFoundError(f"YAML configuration file not found: {candidate}")
    return candidate


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Defaults merged with the sections of an optional YAML file."""
    cfg = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    if not path:
        return cfg
    data = _load_yaml(_resolve_yaml_arg(path))
    for section, values in data.items():
        cfg.setdefault(section, {}).update(_require_dict(values, section))
    return cfg


def to_prefix(value: str, family_name: str = "ipv4") -> Prefix:
    """Turn one command line value into a Prefix of the requested family."""
    family = FAMILIES.get(family_name)
    if family is None:
        raise ValueError(f"Unknown family '{family_name}'. Valid options: {', '.join(FAMILIES)}")
    text = value.strip()
    if family is prefix32.IPV4:
        return prefix32.construct(prefix32.parse_netmask_to_prefix(text))
    if '.' in text:
        raise ValidationError(f"Dotted netmask {text!r} is only valid for ipv4")
    m = _LENGTH_RE.fullmatch(text)
    if not m:
        raise ValidationError(f"Not a prefix length: {value!r}")
    return family.from_length(int(m.group(1)))


def format_prefix(prefix: Prefix) -> str:
    return f"{prefix.to_cidr_str()} {prefix.to_ip_str()} {prefix.hostmask_str()} {prefix.size()}"


def parse_args(argv):
    p = argparse.ArgumentParser(description="Convert between prefix lengths and netmasks")
    p.add_argument("values", nargs="+", help="prefix lengths (24, /24) or netmasks (255.255.255.0)")
    p.add_argument("-config", default=None, help="Path to YAML configuration file")
    p.add_argument("-family", default=None, choices=sorted(FAMILIES),
                   help="Family used for bare prefix lengths (default from config, else ipv4)")
    p.add_argument("-debug", action="store_true", default=None, help="Enable DEBUG logging")
    return p.parse_args(argv)


def main(argv) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)

    run_cfg = _require_dict(cfg["run"], "run")
    output_cfg = _require_dict(cfg["output"], "output")
    debug = bool(run_cfg.get("debug", False)) if args.debug is None else args.debug
    family_name = args.family or str(output_cfg.get("family", "ipv4"))

    configure_debug(debug)
    if run_cfg.get("log_dir"):
        logfile = configure_run_logging("netmask_tool", log_dir=str(run_cfg["log_dir"]),
                                        console_level=logging.DEBUG if debug else logging.INFO)
        logging.info("Logging to console and file: %s", logfile)
    if args.config:
        logging.debug(f"Loaded configuration from: {args.config}")

    failures = 0
    for value in args.values:
        try:
            prefix = to_prefix(value, family_name)
        except ValidationError as e:
            logging.error("%s: %s", value, e)
            failures += 1
            continue
        print(format_prefix(prefix))

    return 1 if failures else 0


def run() -> None:
    try:
        sys.exit(main(sys.argv[1:]))
    except Exception:
        logging.exception("netmask_tool failed with an exception")
        raise


if __name__ == "__main__":
    run()
