#!/usr/bin/env python3

# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

import argparse, sys, os
import logging
from hxdump.config import DumpConfig, load_options
from hxdump.dumper import Dumper
from hxdump.errors import UsageError, SourceError

logger = logging.getLogger('hxd')

def main(args=None):
    # log level from HXD_LOG_LEVEL, optionally also written to HXD_LOG_FILE
    logHandlers = [ logging.StreamHandler() ]
    logFile = os.environ.get('HXD_LOG_FILE', None)
    if logFile:
        logHandlers.append(logging.FileHandler(logFile))
    logLevel = os.environ.get('HXD_LOG_LEVEL', 'DEBUG' if logFile else 'WARNING').upper()
    logging.basicConfig(handlers=logHandlers,
                        level=logLevel,
                        format='%(asctime)s %(levelname)-8s %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')

    try:
        args = parse_args(args)
        dumper = make_dumper(args)
        block = args.block if args.block > 0 else dumper.block_size
        for i, path in enumerate(args.files):
            if i > 0:
                print()
            print(path)
            dump_file(dumper, path, block, args.number, args.skip)
    except UsageError as ex:
        print(f'{ex}', file=sys.stderr)
        return 1
    except SourceError as ex:
        print(f'{ex}', file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        sys.stderr.write("\r")
        return 1
    return 0

def parse_args(args=None):
    aparse = argparse.ArgumentParser(description="Dump files in hexadecimal or binary form")
    aparse.add_argument("files", nargs="+", metavar="FILE", help="Files to dump ('-' for stdin)")
    aparse.add_argument("-b", "--block", default=0, type=int,
            help="Read block of bytes (default: one line worth)")
    aparse.add_argument("-g", "--group", default=None, type=int, help="Group bytes")
    aparse.add_argument("-x", "--bits", action="store_true",
            help="Print bytes in bits instead of hex")
    aparse.add_argument("-n", "--number", default=0, type=int, help="Read number of bytes")
    aparse.add_argument("-s", "--skip", default=0, type=int,
            help="Skip number of bytes (negative counts from end of file)")
    aparse.add_argument("-w", "--width", default=None, type=int, help="Column width")
    aparse.add_argument("-c", "--columns", default=None, type=int, help="Columns")
    aparse.add_argument("-p", "--padding", default=None, help="Padding between columns")
    aparse.add_argument("-d", "--delim", default=None, help="Delimiter")
    aparse.add_argument("-v", "--verbose", action="store_true",
            help="Don't collapse repeated lines")
    aparse.add_argument("-f", "--config", default=None, help="YAML file of dumper options")
    return aparse.parse_args(args)

def make_dumper(args):
    options = load_options(args.config) if args.config else {}
    # flags given on the command line override the config file; a
    # non-positive size counts as not given
    flags = dict(
            width=positive_or_none(args.width),
            columns=positive_or_none(args.columns),
            group=positive_or_none(args.group),
            padding=args.padding,
            delim=args.delim,
            bits=True if args.bits else None,
            verbose=True if args.verbose else None)
    options.update((name, value) for name, value in flags.items() if value is not None)
    config = DumpConfig.from_dict(options)
    logger.debug("Using %r", config)
    return Dumper(config)

def positive_or_none(value):
    return value if value is not None and value > 0 else None

def dump_file(dumper, path, block, size=0, skip=0):
    try:
        if path == '-':
            stream = sys.stdin.buffer
            skip_stream(stream, skip)
            dump_stream(dumper, stream, block, size)
        else:
            with open(path, 'rb') as stream:
                seek_stream(stream, skip)
                dump_stream(dumper, stream, block, size)
    except OSError as e:
        raise SourceError(f"{path}: {e.strerror or e}") from e

def seek_stream(stream, skip):
    if skip > 0:
        stream.seek(skip, os.SEEK_SET)
    elif skip < 0:
        stream.seek(skip, os.SEEK_END)

def skip_stream(stream, skip):
    if skip < 0:
        raise UsageError("Can't skip relative to the end of an unseekable input")
    while skip > 0:
        chunk = stream.read(skip)
        if not chunk:
            break
        skip -= len(chunk)

def read_chunks(stream, block, size=0):
    """Yields chunks of at most block bytes, stopping after size bytes when size > 0."""
    remaining = size if size > 0 else None
    while remaining is None or remaining > 0:
        n = block if remaining is None else min(block, remaining)
        chunk = stream.read(n)
        if not chunk:
            break
        if remaining is not None:
            remaining -= len(chunk)
        yield chunk

def dump_stream(dumper, stream, block, size=0):
    dumper.reset()
    for text in dumper.dump_lines(read_chunks(stream, block, size)):
        print(text)

if __name__ == "__main__":
    sys.exit(main())
