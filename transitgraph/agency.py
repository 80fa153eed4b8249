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


class Agency(GtfsObjectBase):
    """Represents an agency in a feed.

  Attributes:
    All attributes are strings. agency_id is "" when the column is absent,
    which is allowed when the feed has a single agency.
  """

    _SCHEMA = [
        Field("agency_id", default="", defaultable=False),
        Field("agency_name", required=True, default=""),
        Field("agency_url", util.ParseUrl, required=True, default=""),
        Field("agency_timezone", required=True, default=""),
        Field("agency_lang", default=""),
        Field("agency_phone", default=""),
        Field("agency_fare_url", util.ParseUrl, default=""),
        Field("agency_email", util.ParseEmail, default=""),
    ]
    _TABLE_NAME = "agency"
