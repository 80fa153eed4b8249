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


from . import util
from .gtfsobjectbase import GtfsObjectBase
from .materializer import Field
from .materializer import UseDefault
from .problems import FieldError


class FeedInfo(GtfsObjectBase):
    """Model for feed_info.txt."""

    _SCHEMA = [
        Field("feed_publisher_name", required=True, default=""),
        Field("feed_publisher_url", util.ParseUrl, required=True, default=""),
        Field("feed_lang", required=True, default=""),
        Field("feed_start_date", util.DateStringToDateObject),
        Field("feed_end_date", util.DateStringToDateObject),
        Field("feed_version", default=""),
        Field("feed_contact_email", util.ParseEmail, default=""),
        Field("feed_contact_url", util.ParseUrl, default=""),
    ]
    _TABLE_NAME = "feed_info"

    def FinishBuild(self, feed, options):
        if (
            self.feed_start_date is not None
            and self.feed_end_date is not None
            and self.feed_end_date < self.feed_start_date
        ):
            error = FieldError(
                "feed_end_date",
                self.feed_end_date.strftime("%Y%m%d"),
                "feed_end_date is earlier than feed_start_date %s"
                % self.feed_start_date.strftime("%Y%m%d"),
            )
            if not UseDefault(options, error):
                return error
            self.feed_end_date = None
        return None
