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


class FareAttribute(GtfsObjectBase):
    """Represents a fare type.

  price: float
  currency_type: three letter ISO 4217 code
  payment_method: 0 (paid on board) or 1 (paid before boarding)
  transfers: 0, 1 or 2 times the fare allows a transfer, None for unlimited
  transfer_duration: seconds or None
  rules: the FareRule objects of fare_rules.txt naming this fare_id
  """

    _SCHEMA = [
        Field("fare_id", required=True, defaultable=False),
        Field("price", util.NonNegFloatStringToFloat, required=True, default=0.0),
        Field("currency_type", util.ParseCurrency, required=True, default=""),
        Field(
            "payment_method", util.EnumParser([0, 1]), required=True, default=0
        ),
        Field("transfers", util.EnumParser(range(0, 3))),
        Field("transfer_duration", util.NonNegIntStringToInt),
    ]
    _TABLE_NAME = "fare_attributes"

    def __init__(self, field_dict=None, **kwargs):
        GtfsObjectBase.__init__(self, field_dict, **kwargs)
        self.rules = []

    def GetFareRuleList(self):
        return self.rules

    def AddFareRuleObject(self, rule):
        self.rules.append(rule)
