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


import os
import zipfile

from . import problems


class FeedSource(object):
    """Gives access to the files of a feed stored in a directory or a zip.

  A zip archive is opened on the first call to Open and stays open until
  Close. For a directory every call to Open opens a new file and closes the
  one returned by the previous call, so at most one file is open at a time.
  """

    def __init__(self, feed_path=None, zip=None):
        """Initialize a new FeedSource object.

    Args:
      feed_path: string path to a zip file or directory, or a binary file-like
        object holding a zip archive
      zip: a zipfile.ZipFile object, optionally used instead of feed_path
    """
        self._path = feed_path
        self._zip = zip
        # Only close archives opened by this object.
        self._owns_zip = False
        self._is_dir = None
        self._current_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.Close()
        return False

    def _DetermineFormat(self):
        """Decide whether the feed is a directory or a zip archive.

    Raises:
      FeedNotFound if feed_path doesn't exist
      UnknownFormat if feed_path is neither a directory nor a zip archive
    """
        if self._is_dir is not None:
            return
        if self._zip:
            # If zip was passed to __init__ then path isn't used
            assert not self._path
            self._is_dir = False
            return

        if not isinstance(self._path, str) and hasattr(self._path, "read"):
            self._is_dir = False
            return

        if not os.path.exists(self._path):
            raise problems.FeedNotFound(feed_name=self._path)

        if os.path.isdir(self._path):
            self._is_dir = True
        elif zipfile.is_zipfile(self._path):
            self._is_dir = False
        else:
            raise problems.UnknownFormat(feed_name=self._path)

    def _GetZip(self):
        if self._zip is None:
            try:
                self._zip = zipfile.ZipFile(self._path, mode="r")
            except (zipfile.BadZipfile, IOError):
                raise problems.UnknownFormat(feed_name=self._DisplayName())
            self._owns_zip = True
        return self._zip

    def _DisplayName(self):
        if isinstance(self._path, str):
            return self._path
        return "<archive>"

    def IsDirectory(self):
        self._DetermineFormat()
        return self._is_dir

    def GetFileNames(self):
        """Returns a list of file names in the feed."""
        self._DetermineFormat()
        if self._is_dir:
            return os.listdir(self._path)
        return self._GetZip().namelist()

    def HasFile(self, file_name):
        """Returns True if there's a file in the feed with the given file_name."""
        self._DetermineFormat()
        if self._is_dir:
            file_path = os.path.join(self._path, file_name)
            return os.path.isfile(file_path)
        return any(
            info.filename == file_name for info in self._GetZip().infolist()
        )

    def Open(self, file_name):
        """Return a binary stream of file_name or None if the feed lacks it."""
        self._DetermineFormat()
        self._CloseCurrentFile()
        if self._is_dir:
            try:
                self._current_file = open(
                    os.path.join(self._path, file_name), "rb"
                )
            except IOError:  # file not found
                return None
        else:
            archive = self._GetZip()
            for info in archive.infolist():
                if info.filename == file_name:
                    self._current_file = archive.open(info)
                    break
            else:  # file not found in archive
                return None
        return self._current_file

    def _CloseCurrentFile(self):
        if self._current_file is not None:
            self._current_file.close()
            self._current_file = None

    def Close(self):
        self._CloseCurrentFile()
        if self._zip is not None and self._owns_zip:
            self._zip.close()
            self._zip = None
            self._owns_zip = False
