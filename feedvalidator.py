#!/usr/bin/python3

# Copyright (C) 2007 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Loads a GTFS feed and reports the first problem that stops it.

For usage information run feedvalidator.py --help
"""

import logging
import sys

import transitgraph
from transitgraph import util


def FeedSummary(feed, dry_run):
    """Return the lines printed for a feed that was loaded."""
    lines = []
    for table, count in feed.GetEntityCounts():
        lines.append("  %-16s %d" % (table, count))
    if dry_run:
        lines.append(
            "dry run: shapes, routes, services and trips were only validated"
        )
    return lines


def ParseCommandLineArguments(argv=None):
    usage = """%prog [options] <input GTFS.zip>

Loads the GTFS file (or directory) <input GTFS.zip> and prints the number of
entities of each table. If a row is invalid and the options don't allow it to
be skipped or repaired the file, line and problem are printed instead.
"""

    parser = util.OptionParserLongError(
        usage=usage, version="%prog " + transitgraph.__version__
    )
    parser.add_option(
        "--use_default_on_error",
        action="store_true",
        dest="use_default_on_error",
        help="replace an invalid value with the default of its column",
    )
    parser.add_option(
        "--drop_erroneous",
        action="store_true",
        dest="drop_erroneous",
        help="leave out rows that are invalid",
    )
    parser.add_option(
        "--dry_run",
        action="store_true",
        dest="dry_run",
        help="validate the feed without keeping shapes, routes, services "
        "and trips",
    )
    parser.add_option(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="log every step and every skipped or repaired row",
    )
    parser.set_defaults(
        use_default_on_error=False,
        drop_erroneous=False,
        dry_run=False,
        verbose=False,
    )
    (options, args) = parser.parse_args(argv)

    if not len(args) == 1:
        parser.error("You must provide the path of a single feed")
    feed = args[0].strip('"')
    return (feed, options)


def RunFromOptions(feed_path, options):
    """Load feed_path as options say and return an exit code."""
    if options.verbose:
        transitgraph.log.setLevel(logging.DEBUG)
        transitgraph.console.setLevel(logging.DEBUG)

    parse_options = transitgraph.ParseOptions(
        use_default_on_error=options.use_default_on_error,
        drop_erroneous=options.drop_erroneous,
        dry_run=options.dry_run,
    )
    try:
        feed = transitgraph.Parse(feed_path, parse_options)
    except transitgraph.Error as e:
        print(e)
        return 1

    print("feed loaded successfully")
    for line in FeedSummary(feed, options.dry_run):
        print(line)
    return 0


def main(argv=None):
    (feed, options) = ParseCommandLineArguments(argv)
    return RunFromOptions(feed, options)


if __name__ == "__main__":
    sys.exit(main())
