"""
DNSKEY and DS RDATA decoder.

  - decode DNSKEY RDATA and show its fields and key tag
  - decode DS RDATA and show its fields
  - optionally check that a DS refers to a given DNSKEY

RDATA is given on the command line as hex (default) or base64, without the
surrounding resource record envelope (owner, type, class, TTL, RDLENGTH).
"""

import argparse
import base64
import binascii
import json
import logging
import os
import sys
from argparse import Namespace as ArgsType
from typing import Any

from rdtools.common.config import (
    InputEncoding,
    OutputFormat,
    RDToolsConfig,
    get_config,
)
from rdtools.common.display import fmt_dnskey, fmt_ds
from rdtools.common.dnssec import calculate_key_tag, decode_dnskey, decode_ds
from rdtools.common.keydigest import ds_matches_dnskey
from rdtools.common.logging import get_logger
from rdtools.common.validate import DecodeError, MalformedInput
from rdtools.version import __verbose_version__

_DEFAULTS = {
    "debug": False,
    "config": None,
    "owner": ".",
}


def parse_args(defaults: dict, argv: list[str] | None = None) -> ArgsType:
    """
    Parse command line arguments.

    Settings given on the command line override the ones in the configuration file.
    """
    parser = argparse.ArgumentParser(
        description=f"DNSSEC RDATA decoder {__verbose_version__}",
        add_help=True,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Required arguments
    parser.add_argument(
        "--type",
        dest="rrtype",
        choices=["dnskey", "ds"],
        required=True,
        help="Resource record type of the RDATA",
    )
    parser.add_argument(
        "rdata",
        metavar="RDATA",
        type=str,
        nargs="+",
        help="RDATA to decode",
    )

    # Optional arguments
    parser.add_argument(
        "--config",
        dest="config",
        metavar="CFGFILE",
        type=str,
        default=defaults["config"],
        help="Path to the configuration file",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        default=defaults["debug"],
        help="Enable debug operation",
    )
    parser.add_argument(
        "--encoding",
        dest="encoding",
        choices=[this.value for this in InputEncoding],
        default=None,
        help="Encoding of RDATA arguments",
    )
    parser.add_argument(
        "--format",
        dest="format",
        choices=[this.value for this in OutputFormat],
        default=None,
        help="Output format",
    )
    parser.add_argument(
        "--dnskey",
        dest="dnskey",
        metavar="RDATA",
        type=str,
        default=None,
        help="DNSKEY RDATA to check DS records against",
    )
    parser.add_argument(
        "--owner",
        dest="owner",
        metavar="NAME",
        type=str,
        default=defaults["owner"],
        help="Owner name of the DNSKEY (used with --dnskey)",
    )

    return parser.parse_args(argv)


def rdata_from_text(data: str, encoding: InputEncoding) -> bytes:
    """Convert RDATA given as text to bytes. Whitespace is ignored."""
    _data = "".join(data.split())
    try:
        if encoding == InputEncoding.BASE64:
            return base64.b64decode(_data, validate=True)
        return binascii.unhexlify(_data)
    except (binascii.Error, ValueError) as exc:
        raise MalformedInput(f"Bad {encoding.value} RDATA {data!r}: {exc}") from exc


def _dnskey_output(rdata: bytes, config: RDToolsConfig) -> str:
    record = decode_dnskey(rdata)
    key_tag = calculate_key_tag(rdata) if config.output.keytag else None
    if config.output.format == OutputFormat.JSON:
        res: dict[str, Any] = {"type": "DNSKEY", **record.model_dump()}
        if key_tag is not None:
            res["key_tag"] = key_tag
        return json.dumps(res)
    return fmt_dnskey(record, key_tag=key_tag)


def _ds_output(
    rdata: bytes, config: RDToolsConfig, owner: str, dnskey: bytes | None
) -> str:
    record = decode_ds(rdata)
    match = None if dnskey is None else ds_matches_dnskey(owner, rdata, dnskey)
    if config.output.format == OutputFormat.JSON:
        res: dict[str, Any] = {"type": "DS", **record.model_dump()}
        if match is not None:
            res["matches_dnskey"] = match
        return json.dumps(res)
    out = fmt_ds(record)
    if match is not None:
        out += " ; " + ("matches DNSKEY" if match else "DOES NOT match DNSKEY")
    return out


def rrdecode(
    logger: logging.Logger,
    args: ArgsType,
    config: RDToolsConfig | None = None,
) -> bool:
    """Main entry point for decoding RDATA given on the command line."""
    #
    # Load configuration, if not provided already
    #
    if config is None:
        config = get_config(args.config)

    _overrides: dict[str, dict[str, str]] = {}
    if args.encoding:
        _overrides["input"] = {"encoding": args.encoding}
    if args.format:
        _overrides["output"] = {"format": args.format}
    if _overrides:
        config = config.update(_overrides)

    encoding = config.input.encoding
    res = True
    try:
        dnskey = rdata_from_text(args.dnskey, encoding) if args.dnskey else None
    except DecodeError as exc:
        logger.error(f"Failed to parse --dnskey: {exc}")
        return False

    for this in args.rdata:
        try:
            rdata = rdata_from_text(this, encoding)
            if args.rrtype == "dnskey":
                print(_dnskey_output(rdata, config))
            else:
                print(_ds_output(rdata, config, args.owner, dnskey))
        except DecodeError as exc:
            logger.error(f"Failed to decode {args.rrtype.upper()} RDATA: {exc}")
            res = False
    return res


def main(argv: list[str] | None = None) -> None:
    """Main program function."""
    try:
        progname = os.path.basename(sys.argv[0])
        args = parse_args(_DEFAULTS, argv)
        logger = get_logger(progname=progname, debug=args.debug).getChild(__name__)
        try:
            config = get_config(args.config)
        except FileNotFoundError as exc:
            logger.critical(str(exc))
            sys.exit(-1)
        if config.logging.syslog or config.logging.filelog:
            get_logger(progname=progname, debug=args.debug, config=config.logging)
        res = rrdecode(logger, args, config)
        if res is True:
            sys.exit(0)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
