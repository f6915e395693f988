# FileSplitter/FileSplitter/splitter.py
"""
Split line-oriented text files into numbered chunks of at most N data lines,
optionally repeating the header block at the top of every chunk.
"""
import glob
import math
from pathlib import Path
from typing import List, Tuple, Optional, Union, Iterable, NamedTuple, TextIO
from tqdm import tqdm
from .config import SplitConfig, load_config
from .errors import InvalidPathError, OpenFailureError
from .utils.encoding import TextEncoding, BOM_CHAR, sniff_encoding
from .utils.logging_config import setup_logger

PathLike = Union[str, Path]


class Batch(NamedTuple):
    """One output chunk: 1-based data line range and the file name it is written to"""
    number: int
    first_line: int
    last_line: int
    file_name: str


def resolve_inputs(patterns: Iterable[PathLike]) -> List[Path]:
    """Expand glob patterns to existing regular files, first-seen order, no duplicates"""
    if isinstance(patterns, (str, Path)):
        patterns = [patterns]
    patterns = list(patterns)

    resolved = []
    seen = set()
    for pattern in patterns:
        for match in sorted(glob.glob(str(pattern), recursive=True)):
            path = Path(match)
            key = path.resolve()
            if path.is_file() and key not in seen:
                seen.add(key)
                resolved.append(path)

    if not resolved:
        raise InvalidPathError(patterns)
    return resolved


def plan_batches(input_path: PathLike, total_data_lines: int, split_size: int,
                 batch_naming: bool = False) -> List[Batch]:
    """
    Compute the batches for an input with the given number of data lines.

    Default names are <stem>_<batch number zero-padded to the width of the last
    batch number><suffix>; with batch_naming they are <stem>_<first>-<last><suffix>.
    """
    input_path = Path(input_path)
    if total_data_lines <= 0:
        return []

    total_batches = math.ceil(total_data_lines / split_size)
    width = len(str(total_batches))

    batches = []
    first = 1
    for number in range(1, total_batches + 1):
        last = total_data_lines if number == total_batches else first + split_size - 1
        suffix = f"{first}-{last}" if batch_naming else str(number).zfill(width)
        batches.append(Batch(number, first, last, f"{input_path.stem}_{suffix}{input_path.suffix}"))
        first = last + 1
    return batches


def _open_reader(path: Path, encoding: TextEncoding) -> TextIO:
    """Open an input for reading, positioned after any byte-order mark"""
    f = open(path, 'r', encoding=encoding.codec)
    try:
        _skip_bom(f)
    except Exception:
        f.close()
        raise
    return f


def _skip_bom(f: TextIO) -> None:
    f.seek(0)
    if f.read(1) != BOM_CHAR:
        f.seek(0)


def _terminated(line: str) -> str:
    return line if line.endswith('\n') else line + '\n'


class LineSplitter:
    """Splits input files one at a time according to a SplitConfig"""

    def __init__(self, config: SplitConfig):
        self.config = config
        self.logger = setup_logger(__name__, config.verbosity)
        self.failures: List[Tuple[Path, Exception]] = []

    def resolve_export_dir(self, input_path: Path) -> Path:
        """Configured export directory, or the input's own directory if that is unusable"""
        export_path = self.config.export_path
        if export_path is not None:
            export_dir = Path(export_path)
            if export_dir.is_dir():
                return export_dir
            self.logger.warning(f"Export path {export_path} is not an existing directory, "
                                f"writing beside {input_path.name} instead")
        return input_path.resolve().parent

    def split_file(self, input_path: PathLike, encoding: TextEncoding) -> List[Path]:
        """
        Split a single input file and return the paths of the outputs written.

        Raises OpenFailureError if the input can't be read or an output can't be written.
        Outputs completed before the failure are left on disk.
        """
        input_path = Path(input_path)
        export_dir = self.resolve_export_dir(input_path)
        written = []

        try:
            reader = _open_reader(input_path, encoding)
        except (OSError, UnicodeError) as e:
            raise OpenFailureError(input_path, e) from e

        with reader:
            try:
                total_lines = sum(1 for _ in reader)
                _skip_bom(reader)

                total_data_lines = max(total_lines - self.config.header_lines, 0)
                batches = plan_batches(input_path, total_data_lines,
                                       self.config.split_size, self.config.batch_naming)
                self.logger.info(f"{input_path.name}: {total_lines} lines, "
                                 f"{total_data_lines} data lines, {len(batches)} batches")

                header = []
                for _ in range(self.config.header_lines):
                    line = reader.readline()
                    if not line:
                        break
                    header.append(_terminated(line))
            except (OSError, UnicodeError) as e:
                raise OpenFailureError(input_path, e) from e

            if self.config.dry_run:
                for batch in batches:
                    self.logger.info(f"[dry run] {batch.file_name}: lines {batch.first_line}-{batch.last_line}")
                return written

            with tqdm(batches, desc=input_path.name, unit='file',
                      disable=self.config.verbosity == 'quiet') as progress:
                for batch in progress:
                    output_path = export_dir / batch.file_name
                    try:
                        self._write_batch(reader, output_path, batch, header, encoding)
                    except (OSError, UnicodeError) as e:
                        raise OpenFailureError(output_path, e) from e
                    written.append(output_path)
                    self.logger.debug(f"Wrote {output_path} (lines {batch.first_line}-{batch.last_line})")

        return written

    def _write_batch(self, reader: TextIO, output_path: Path, batch: Batch,
                     header: List[str], encoding: TextEncoding) -> None:
        with open(output_path, 'w', encoding=encoding.codec, newline=self.config.newline) as out:
            if encoding.signature:
                out.write(BOM_CHAR)
            if not self.config.skip_header:
                out.writelines(header)

            for _ in range(batch.last_line - batch.first_line + 1):
                line = reader.readline()
                if not line:
                    break
                out.write(_terminated(line))

    def split(self, paths: Union[PathLike, Iterable[PathLike]]) -> int:
        """
        Split every file matching the given paths/glob patterns.

        Returns the number of files fully processed. Per-file failures are
        logged and collected in self.failures; on_error decides whether the
        remaining inputs are still attempted.
        """
        inputs = resolve_inputs(paths)
        self.logger.info(f"Found {len(inputs)} input file(s)")

        shared_encoding = self.config.text_encoding
        processed = 0

        for input_path in inputs:
            try:
                encoding = shared_encoding
                if encoding is None:
                    encoding = sniff_encoding(input_path)
                    self.logger.info(f"Detected encoding {encoding.name} ({encoding.codec}) from {input_path.name}")
                    if self.config.detect_encoding == 'once':
                        shared_encoding = encoding

                written = self.split_file(input_path, encoding)
            except OSError as e:
                self.logger.error(f"Error processing {input_path}: {e}")
                self.failures.append((input_path, e))
                if self.config.on_error == 'stop':
                    self.logger.error("Stopping after first failure")
                    break
                continue

            processed += 1
            self.logger.info(f"Split {input_path.name} into {len(written)} file(s)")

        self.logger.info(f"Processed {processed} of {len(inputs)} file(s)")
        return processed


def split(paths: Union[PathLike, Iterable[PathLike]],
          split_size: int,
          export_path: Optional[PathLike] = None,
          header_lines: int = 1,
          skip_header: bool = False,
          encoding: Optional[str] = None,
          batch_naming: bool = False,
          **options) -> int:
    """
    Split files matching paths into chunks of at most split_size data lines.

    Args:
        paths: File paths or glob patterns
        split_size: Data lines per output file, excluding the header
        export_path: Existing directory for outputs (defaults to each input's directory)
        header_lines: Number of leading lines treated as the header
        skip_header: Don't repeat the header in the outputs
        encoding: Encoding name; sniffed from the byte-order mark when omitted
        batch_naming: Name outputs by data line range instead of batch number
        **options: detect_encoding, on_error, line_ending, dry_run, verbosity

    Returns:
        Number of input files processed
    """
    config = load_config(split_size=split_size, export_path=export_path,
                         header_lines=header_lines, skip_header=skip_header,
                         encoding=encoding, batch_naming=batch_naming, **options)
    return LineSplitter(config).split(paths)
