#!/usr/bin/env python3
"""
WsdlWrangler

This script loads a WSDL 1.1 document and prints its services, bindings and port types,
resolving every cross reference along the way. Broken references are reported with the
location of the offending element.

Usage:
    python wsdl_wrangler.py --input <wsdl_file> [--section <section> ...] [--verbose] [--help]

Arguments:
    --input, -i     : Path to the WSDL file to inspect
    --section, -s   : Sections to print (services, bindings, port-types, or all)
                      Can provide multiple sections (e.g., --section services bindings)
                      Comma-separated values are accepted too (default: all)
    --verbose, -v   : Log every resolution step
    --help, -h      : Show this help message

Environment variables WW_INPUT_FILE, WW_SECTIONS and WW_VERBOSE override the arguments.

Example:
    python wsdl_wrangler.py --input weather.wsdl
    python wsdl_wrangler.py --input weather.wsdl --section bindings
    python wsdl_wrangler.py --input weather.wsdl --section services,port-types --verbose
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from lxml import etree

from wsdl_debug import SECTIONS, format_definitions
from wsdl_errors import WsdlError
from wsdl_model import Definitions

logger = logging.getLogger(__name__)


class WsdlInspector:
    """
    Loads a WSDL file and renders the listing of its contents.
    """

    def __init__(self, input_file: str, sections: Optional[List[str]] = None):
        """
        Initialize the inspector.

        Args:
            input_file: Path to the WSDL file
            sections: Sections to print (default: all)
        """
        self.input_file = input_file
        self.sections = sections or list(SECTIONS)
        self.definitions = None

    def load(self) -> bool:
        """
        Parse the input file and locate its definitions element.

        Returns:
            bool: True if loading was successful, False otherwise
        """
        if not os.path.exists(self.input_file):
            print(f"Error: Input file '{self.input_file}' does not exist.", file=sys.stderr)
            return False
        try:
            document = etree.parse(self.input_file)
        except etree.XMLSyntaxError as e:
            print(f"Error: '{self.input_file}' is not well-formed XML: {e}", file=sys.stderr)
            return False
        try:
            self.definitions = Definitions.from_document(document)
        except WsdlError as e:
            print(f"Error: {e} at {e.location}", file=sys.stderr)
            return False
        logger.debug("Loaded definitions from %s", self.input_file)
        return True

    def print_listing(self) -> bool:
        """
        Print the requested sections.

        Returns:
            bool: True if every reference resolved, False otherwise
        """
        if self.definitions is None:
            print("Error: No WSDL document loaded. Load the input file first.", file=sys.stderr)
            return False
        try:
            lines = format_definitions(self.definitions, self.sections)
        except WsdlError as e:
            print(f"Error: {e} at {e.location}", file=sys.stderr)
            return False
        for line in lines:
            print(line)
        return True


def _split_sections(values: List[str]) -> List[str]:
    sections = []
    for value in values:
        sections.extend(s.strip() for s in value.replace(',', ' ').split() if s.strip())
    return sections


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="List the services, bindings and port types of a WSDL document",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('--input', '-i', required=True, help='Path to the WSDL file to inspect')
    parser.add_argument('--section', '-s', nargs='+', default=['all'],
                        help='Sections to print (services, bindings, port-types, or all)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every resolution step')

    args = parser.parse_args(argv)

    sections = _split_sections(args.section)
    valid_choices = list(SECTIONS) + ['all']
    for section in sections:
        if section not in valid_choices:
            parser.error(f"argument --section/-s: invalid choice: '{section}' (choose from 'services', 'bindings', 'port-types', 'all')")
    args.section = list(SECTIONS) if 'all' in sections else sections

    return args


def main(argv: Optional[List[str]] = None):
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)

    # Override with environment variables if set
    input_file = os.environ.get('WW_INPUT_FILE', args.input)
    sections = args.section
    if 'WW_SECTIONS' in os.environ:
        env_sections = _split_sections([os.environ['WW_SECTIONS']])
        sections = list(SECTIONS) if 'all' in env_sections else env_sections
    verbose = args.verbose or os.environ.get('WW_VERBOSE', '').lower() in ('1', 'true', 'yes')

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inspector = WsdlInspector(input_file, sections)
    if not inspector.load():
        sys.exit(1)
    try:
        ok = inspector.print_listing()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        ok = False
    if not ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
