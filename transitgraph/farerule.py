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


from .gtfsobjectbase import GtfsObjectBase
from .materializer import Field


class FareRule(GtfsObjectBase):
    """This class represents a rule that determines which itineraries a
  fare rule applies to."""

    _SCHEMA = [
        Field(
            "fare_id",
            required=True,
            reference="fare_attributes",
            defaultable=False,
        ),
        Field("route_id", reference="routes"),
        Field("origin_id", default=""),
        Field("destination_id", default=""),
        Field("contains_id", default=""),
    ]
    _TABLE_NAME = "fare_rules"
