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

# Code shared between tests.


import os
import os.path
import re
import shutil
import sys
import tempfile
import unittest
import zipfile
from io import BytesIO
from io import StringIO

import transitgraph


class TestCase(unittest.TestCase):
    """Base of every TestCase class in this project.

    This adds some methods that perhaps should be in unittest.TestCase.
    """

    def assertMatchesRegex(self, regex, string):
        """Assert that regex is found in string."""
        if not re.search(regex, string):
            self.fail("string %r did not match regex %r" % (string, regex))

    def assertParseError(self, e, file_name, line_num, regex=None):
        """Assert that the ParseError e points at line_num of file_name."""
        self.assertEqual(file_name, e.file_name)
        self.assertEqual(line_num, e.line_num)
        if regex:
            self.assertMatchesRegex(regex, e.description)


class RedirectStdOutTestCaseBase(TestCase):
    """Save stdout to the StringIO buffer self.this_stdout"""

    def setUp(self):
        self.saved_stdout = sys.stdout
        self.this_stdout = StringIO()
        sys.stdout = self.this_stdout

    def tearDown(self):
        sys.stdout = self.saved_stdout
        self.this_stdout.close()


class TempDirTestCaseBase(TestCase):
    """Create a temporary directory self.tempdirpath before running the test
    and remove it after the test.
    """

    def setUp(self):
        self.tempdirpath = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tempdirpath)

    def WriteFiles(self, contents, dirname=None):
        """Write a dict of file name to str contents into a new directory.

        Returns:
          The path of the directory."""
        path = os.path.join(self.tempdirpath, dirname or "feed")
        os.mkdir(path)
        for name, text in contents.items():
            with open(os.path.join(path, name), "wb") as f:
                f.write(text.encode("utf-8"))
        return path


def ConvertDictToZip(contents):
    """Converts a dictionary to an in-memory zipfile.

    Arguments:
        contents: A dictionary mapping file names to str file contents

    Returns:
        The new file's in-memory contents as a file-like object."""
    zipfile_mem = BytesIO()
    zip = zipfile.ZipFile(zipfile_mem, "a")
    for arcname, text in sorted(contents.items()):
        zip.writestr(arcname, text)
    zip.close()
    zipfile_mem.seek(0)
    return zipfile_mem


# A small feed that loads with the default, strictest options.
DEFAULT_FEED = {
    "agency.txt": (
        "agency_id,agency_name,agency_url,agency_timezone\n"
        "DTA,Demo Agency,http://google.com,America/Los_Angeles\n"
    ),
    "calendar.txt": (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,"
        "start_date,end_date\n"
        "FULLW,1,1,1,1,1,1,1,20070101,20101231\n"
        "WE,0,0,0,0,0,1,1,20070101,20101231\n"
    ),
    "calendar_dates.txt": (
        "service_id,date,exception_type\n" "FULLW,20070101,1\n"
    ),
    "routes.txt": (
        "route_id,agency_id,route_short_name,route_long_name,route_type\n"
        "AB,DTA,,Airport Bullfrog,3\n"
    ),
    "trips.txt": "route_id,service_id,trip_id\n" "AB,FULLW,AB1\n",
    "stops.txt": (
        "stop_id,stop_name,stop_lat,stop_lon\n"
        "BEATTY_AIRPORT,Airport,36.868446,-116.784582\n"
        "BULLFROG,Bullfrog,36.88108,-116.81797\n"
        "STAGECOACH,Stagecoach Hotel,36.915682,-116.751677\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
        "AB1,10:00:00,10:00:00,BEATTY_AIRPORT,1\n"
        "AB1,10:20:00,10:20:00,BULLFROG,2\n"
        "AB1,10:25:00,10:25:00,STAGECOACH,3\n"
    ),
}


class MemoryZipTestCase(TestCase):
    """Base for TestCase classes which read from an in-memory zip file.

    A test that loads data from this zip file exercises almost all the code
    used when the feedvalidator runs, but does not touch disk. setUp fills the
    file dict with DEFAULT_FEED; tests change it before calling
    MakeLoaderAndLoad."""

    def setUp(self):
        self.zip_contents = dict(DEFAULT_FEED)

    def MakeLoaderAndLoad(self, options=None):
        """Returns a Feed loaded with the contents of the file dict."""
        self.CreateZip()
        self.loader = transitgraph.Loader(options=options, zip=self.zip)
        return self.loader.Load()

    def ExpectParseError(self, file_name, line_num, regex=None, options=None):
        """Load the file dict and assert it fails at line_num of file_name.

        Returns:
          The ParseError."""
        with self.assertRaises(transitgraph.ParseError) as cm:
            self.MakeLoaderAndLoad(options)
        self.assertParseError(cm.exception, file_name, line_num, regex)
        return cm.exception

    def AppendToArchiveContents(self, arcname, s):
        """Append string s to file arcname in the file dict.

        All calls to this function, if any, should be made before calling
        MakeLoaderAndLoad."""
        current_contents = self.zip_contents[arcname]
        self.zip_contents[arcname] = current_contents + s

    def SetArchiveContents(self, arcname, contents):
        """Set the contents of file arcname in the file dict.

        All calls to this function, if any, should be made before calling
        MakeLoaderAndLoad."""
        self.zip_contents[arcname] = contents

    def GetArchiveContents(self, arcname):
        """Get the contents of file arcname in the file dict."""
        return self.zip_contents[arcname]

    def RemoveArchive(self, arcname):
        """Remove file arcname from the file dict.

        All calls to this function, if any, should be made before calling
        MakeLoaderAndLoad."""
        del self.zip_contents[arcname]

    def CreateZip(self):
        """Create an in-memory GTFS zipfile from the contents of the file dict."""
        self.zipfile = BytesIO()
        self.zip = zipfile.ZipFile(self.zipfile, "a")
        for (arcname, contents) in list(self.zip_contents.items()):
            self.zip.writestr(arcname, contents)
