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


from . import consistency
from . import gtfsfactory
from . import materializer
from . import problems
from .feed import Feed
from .materializer import DropRecord
from .materializer import UseDefault
from .options import default_options
from .problems import FieldError
from .problems import log
from .reader import CsvRecordReader
from .serviceperiod import ServicePeriod
from .shape import Shape
from .source import FeedSource


class Loader(object):
    def __init__(self, feed_path=None, options=None, zip=None, gtfs_factory=None):
        """Initialize a new Loader object.

    Args:
      feed_path: string path to a zip file or directory, or a binary file-like
        object holding a zip archive
      options: a ParseOptions object, by default any invalid record is fatal
      zip: a zipfile.ZipFile object, optionally used instead of feed_path
      gtfs_factory: a GtfsFactory, the registry of the files to load
    """
        if gtfs_factory is None:
            gtfs_factory = gtfsfactory.GetGtfsFactory()
        if options is None:
            options = default_options

        self._source = FeedSource(feed_path, zip)
        self._options = options
        self._gtfs_factory = gtfs_factory
        self._feed = None
        self._stage_loaders = {
            "agency.txt": self._LoadAgencies,
            "feed_info.txt": self._LoadFeedInfo,
            "stops.txt": self._LoadStops,
            "shapes.txt": self._LoadShapes,
            "routes.txt": self._LoadRoutes,
            "calendar.txt": self._LoadCalendar,
            "calendar_dates.txt": self._LoadCalendarDates,
            "trips.txt": self._LoadTrips,
            "stop_times.txt": self._LoadStopTimes,
            "fare_attributes.txt": self._LoadFareAttributes,
            "fare_rules.txt": self._LoadFareRules,
            "frequencies.txt": self._LoadFrequencies,
            "transfers.txt": self._LoadTransfers,
        }

    def _CheckMissingFile(self, file_name):
        """Raise MissingFile if the feed can't do without file_name."""
        if self._gtfs_factory.IsFileRequired(file_name):
            raise problems.MissingFile(file_name=file_name)
        group = self._gtfs_factory.GetOneOfRequiredGroup(file_name)
        if group and not any(self._source.HasFile(name) for name in group):
            raise problems.MissingFile(file_name=" or ".join(group))
        log.debug("Skipping %s, it isn't in the feed", file_name)

    def _ReadRecords(self, file_name):
        """Yield (record, line_num) for each row of file_name."""
        stream = self._source.Open(file_name)
        if stream is None:
            self._CheckMissingFile(file_name)
            return
        reader = CsvRecordReader(stream, file_name)
        for record in reader:
            yield record, reader.line_num

    def _ParseError(self, file_name, line_num, error):
        if error.line_num is not None:
            line_num = error.line_num
        return problems.ParseError(file_name, line_num, error.FormatProblem())

    def _RecordError(self, file_name, line_num, error):
        """Drop the record behind error or raise it as a ParseError."""
        if not DropRecord(self._options, error):
            raise self._ParseError(file_name, line_num, error)

    def _BuildEntities(self, file_name):
        """Yield (entity, line_num) for each valid row of file_name."""
        entity_class = self._gtfs_factory.GetGtfsClassByFileName(file_name)
        count = 0
        for record, line_num in self._ReadRecords(file_name):
            result = materializer.BuildEntity(
                entity_class, record, self._feed, self._options
            )
            if isinstance(result, FieldError):
                self._RecordError(file_name, line_num, result)
                continue
            count += 1
            yield result, line_num
        log.debug("Read %d entities from %s", count, file_name)

    def _AddKeyed(self, table, entity, key_column, file_name, line_num):
        """Add entity to table under its key_column value.

    Returns:
      True if the entity was added, False if it was dropped as a duplicate.
    """
        key = getattr(entity, key_column)
        if key in table:
            self._RecordError(
                file_name,
                line_num,
                FieldError(
                    key_column,
                    key,
                    "Duplicate ID. The ID must be unique in %s" % file_name,
                ),
            )
            return False
        table[key] = entity
        return True

    def _ClearForDryRun(self, table):
        """Keep only the keys of table when the options ask for a dry run."""
        if self._options.dry_run:
            for key in table:
                table[key] = None

    def _LoadAgencies(self, file_name):
        agencies = self._feed.agencies
        for agency, line_num in self._BuildEntities(file_name):
            if agencies and not agency.agency_id:
                reason = (
                    "agency_id is required when the feed has more than one "
                    "agency"
                )
            elif "" in agencies:
                reason = (
                    "The first agency has no agency_id, which is only allowed "
                    "when the feed has a single agency"
                )
            else:
                reason = None
            if reason is not None:
                self._RecordError(
                    file_name,
                    line_num,
                    FieldError("agency_id", agency.agency_id, reason),
                )
                continue
            self._AddKeyed(agencies, agency, "agency_id", file_name, line_num)

    def _LoadFeedInfo(self, file_name):
        for feed_info, _ in self._BuildEntities(file_name):
            self._feed.feed_infos.append(feed_info)

    def _LoadStops(self, file_name):
        line_nums = {}
        for stop, line_num in self._BuildEntities(file_name):
            if self._AddKeyed(
                self._feed.stops, stop, "stop_id", file_name, line_num
            ):
                line_nums[stop.stop_id] = line_num
        self._LinkParentStations(file_name, line_nums)

    def _LinkParentStations(self, file_name, line_nums):
        """Check the parent_station of every stop.

    Runs once the whole of stops.txt is read. Dropping a stop can leave its
    children with a dangling parent_station, so passes repeat until one
    drops nothing.
    """
        stops = self._feed.stops
        dropped = True
        while dropped:
            dropped = False
            for stop in list(stops.values()):
                parent_id = stop.parent_station
                if parent_id is None:
                    continue
                if parent_id == stop.stop_id:
                    reason = "Stop %s is its own parent_station" % stop.stop_id
                elif parent_id not in stops:
                    reason = (
                        "Stop %s has a parent_station which wasn't defined in "
                        "stops.txt" % stop.stop_id
                    )
                else:
                    continue
                error = FieldError("parent_station", parent_id, reason)
                if UseDefault(self._options, error):
                    stop.parent_station = None
                    continue
                self._RecordError(file_name, line_nums[stop.stop_id], error)
                del stops[stop.stop_id]
                dropped = True

    def _LoadShapes(self, file_name):
        shapes = self._feed.shapes
        for shapepoint, line_num in self._BuildEntities(file_name):
            shapepoint._line_num = line_num
            shape = shapes.get(shapepoint.shape_id)
            if shape is None:
                shape = Shape(shapepoint.shape_id)
                shapes[shape.shape_id] = shape
            error = shape.AddShapePointObjectUnsorted(shapepoint)
            if error is not None:
                self._RecordError(file_name, line_num, error)

        for shape in shapes.values():
            shape.SortPoints()
            error = consistency.CheckShapeMeasure(shape, self._options)
            if error is not None:
                raise self._ParseError(file_name, None, error)
        self._ClearForDryRun(shapes)

    def _LoadRoutes(self, file_name):
        routes = self._feed.routes
        for route, line_num in self._BuildEntities(file_name):
            added = self._AddKeyed(
                routes, route, "route_id", file_name, line_num
            )
            if added and self._options.dry_run:
                routes[route.route_id] = None

    def _LoadCalendar(self, file_name):
        for period, line_num in self._BuildEntities(file_name):
            self._AddKeyed(
                self._feed.services, period, "service_id", file_name, line_num
            )

    def _LoadCalendarDates(self, file_name):
        services = self._feed.services
        for service_date, line_num in self._BuildEntities(file_name):
            period = services.get(service_date.service_id)
            if period is None:
                period = ServicePeriod(service_id=service_date.service_id)
                services[period.service_id] = period
            error = period.SetDateException(
                service_date.date, service_date.exception_type
            )
            if error is not None:
                self._RecordError(file_name, line_num, error)
        # Both calendar files are read before services may be cleared.
        self._ClearForDryRun(services)

    def _LoadTrips(self, file_name):
        for trip, line_num in self._BuildEntities(file_name):
            self._AddKeyed(
                self._feed.trips, trip, "trip_id", file_name, line_num
            )

    def _LoadStopTimes(self, file_name):
        trips = self._feed.trips
        for stoptime, line_num in self._BuildEntities(file_name):
            stoptime._line_num = line_num
            error = trips[stoptime.trip_id].AddStopTimeObjectUnordered(stoptime)
            if error is not None:
                self._RecordError(file_name, line_num, error)

        for trip in trips.values():
            trip.SortStopTimes()
            error = consistency.CheckStopTimeMeasure(trip, self._options)
            if error is not None:
                raise self._ParseError(file_name, None, error)
        self._ClearForDryRun(trips)

    def _LoadFareAttributes(self, file_name):
        for fare, line_num in self._BuildEntities(file_name):
            self._AddKeyed(
                self._feed.fare_attributes, fare, "fare_id", file_name, line_num
            )

    def _LoadFareRules(self, file_name):
        for rule, _ in self._BuildEntities(file_name):
            self._feed.fare_attributes[rule.fare_id].AddFareRuleObject(rule)

    def _LoadFrequencies(self, file_name):
        for frequency, _ in self._BuildEntities(file_name):
            trip = self._feed.trips[frequency.trip_id]
            # None after a dry run: the frequency was only validated.
            if trip is not None:
                trip.AddFrequencyObject(frequency)

    def _LoadTransfers(self, file_name):
        for transfer, _ in self._BuildEntities(file_name):
            self._feed.transfers.append(transfer)

    def Load(self):
        """Parse the feed and return a Feed.

    Raises:
      FeedAccessError if the feed or one of its required files can't be
      opened, ParseError at the first record the options don't let the
      loader skip or repair.
    """
        self._feed = Feed()
        try:
            for file_name in self._gtfs_factory.GetLoadingOrder():
                log.debug("Loading %s", file_name)
                self._stage_loaders[file_name](file_name)
        finally:
            self._source.Close()
        feed = self._feed
        self._feed = None
        return feed


def Parse(feed_path=None, options=None, zip=None):
    """Parse the feed at feed_path, see Loader."""
    return Loader(feed_path, options=options, zip=zip).Load()
