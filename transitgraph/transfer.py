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


class Transfer(GtfsObjectBase):
    """Represents a transfer in a schedule"""

    _SCHEMA = [
        Field(
            "from_stop_id", required=True, reference="stops", defaultable=False
        ),
        Field(
            "to_stop_id", required=True, reference="stops", defaultable=False
        ),
        Field("transfer_type", util.EnumParser(range(0, 4)), default=0),
        Field("min_transfer_time", util.NonNegIntStringToInt),
    ]
    _TABLE_NAME = "transfers"
