# FileSplitter/FileSplitter/cli.py
import argparse
import sys
from typing import List, Optional
from .config import load_config, DETECT_POLICIES, ERROR_POLICIES, LINE_ENDINGS, VERBOSITY_LEVELS
from .errors import SplitterError
from .splitter import LineSplitter
from .utils.encoding import ENCODING_NAMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='split-file',
        description="Split text files into chunks of N lines, repeating the header in each chunk"
    )

    parser.add_argument("paths", nargs='+',
                        help="Input files; glob wildcards are expanded")
    parser.add_argument("-o", "--export-path", type=str, default=None,
                        help="Existing directory for output files (default: beside each input)")
    parser.add_argument("-s", "--split-size", type=int, default=None,
                        help="Data lines per output file, excluding the header. "
                             "Required here unless the -c config file sets split_size")
    parser.add_argument("-H", "--header-lines", type=int, default=None,
                        help="Number of header lines at the top of each input (default: 1)")
    parser.add_argument("--skip-header", action="store_true", default=None,
                        help="Don't write the header into the output files")
    parser.add_argument("-e", "--encoding", choices=ENCODING_NAMES, default=None,
                        help="Input/output encoding (default: detect from byte-order mark)")
    parser.add_argument("--batch-naming", action="store_true", default=None,
                        help="Name outputs by data line range instead of batch number")

    parser.add_argument("--detect-encoding", choices=DETECT_POLICIES, default=None,
                        help="Sniff the first input once, or every input (default: once)")
    parser.add_argument("--on-error", choices=ERROR_POLICIES, default=None,
                        help="Stop the run or continue with the next input after a failure (default: stop)")
    parser.add_argument("--line-ending", choices=list(LINE_ENDINGS), default=None,
                        help="Line terminator for output files (default: native)")
    parser.add_argument("--dry-run", action="store_true", default=None,
                        help="Report the planned output files without writing them")
    parser.add_argument("-c", "--config", type=str, default=None,
                        help="YAML file with settings merged over the defaults")
    parser.add_argument("-v", "--verbosity", choices=VERBOSITY_LEVELS, default=None,
                        help="Logging verbosity (default: normal)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            split_size=args.split_size,
            header_lines=args.header_lines,
            skip_header=args.skip_header,
            encoding=args.encoding,
            batch_naming=args.batch_naming,
            export_path=args.export_path,
            detect_encoding=args.detect_encoding,
            on_error=args.on_error,
            line_ending=args.line_ending,
            dry_run=args.dry_run,
            verbosity=args.verbosity
        )
        splitter = LineSplitter(config)
        splitter.split(args.paths)
    except SplitterError as e:
        parser.exit(2, f"{parser.prog}: error: {e}\n")

    return 1 if splitter.failures else 0


if __name__ == '__main__':
    sys.exit(main())
