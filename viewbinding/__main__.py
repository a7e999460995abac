import os
import re
import sys
from argparse import ArgumentParser, Namespace
from typing import List, Optional

from . import __version__ as package_version
from . import generator

_APPLICATION_ID_RE = re.compile(r'^[a-zA-Z][\w]+_[\w]+_[\w]+$')


class ConfigError(Exception):
    pass


def build_parser() -> ArgumentParser:
    parser = ArgumentParser('viewbinding', description='View Binding Code Generator')
    parser.add_argument('-a', '--application-id', required=True, metavar='ID',
                        help='The application ID')
    parser.add_argument('-d', '--directory', required=True, metavar='DIR',
                        help='The directory to scan for UI files')
    parser.add_argument('-o', '--output-directory', required=True, metavar='DIR',
                        help='The output directory for generated files')
    parser.add_argument('--version', action='version',
                        version='%(prog)s {}'.format(package_version))
    return parser


def check_arguments(args: Namespace):
    if not _APPLICATION_ID_RE.match(args.application_id):
        raise ConfigError("application-id '{}' is not valid. It must be in the format "
                          "com_example_AppName".format(args.application_id))

    if not os.path.isdir(args.directory):
        raise ConfigError("--directory '{}' is not a valid directory.".format(args.directory))

    if os.path.exists(args.output_directory):
        if not os.path.isdir(args.output_directory):
            raise ConfigError("--output-directory '{}' is not a valid directory."
                              .format(args.output_directory))
    else:
        try:
            os.makedirs(args.output_directory, mode=0o755)
        except OSError as e:
            raise ConfigError("could not create output directory '{}': {}"
                              .format(args.output_directory, e.strerror or e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        check_arguments(args)
    except ConfigError as e:
        print('Error: {}'.format(e), file=sys.stderr)
        return 1

    generator.generate(args.directory, args.output_directory, args.application_id)
    return 0


if __name__ == '__main__':
    sys.exit(main())
