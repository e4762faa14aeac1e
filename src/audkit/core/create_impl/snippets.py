"""
Text snippets written into generated packages.

``YEAR`` in the license texts is replaced with the current year.
"""

from .templates import substitute_template_vars

YEAR_PLACEHOLDER = "YEAR"

OPEN_SOURCE_LICENSE = """MIT License

Copyright (c) YEAR Dr. Gabriel Gatzsche

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

PRIVATE_LICENSE = """Copyright (c) YEAR Dr. Gabriel Gatzsche. All Rights Reserved.

This software and its documentation are proprietary and confidential.
Unauthorized copying, distribution, modification or use of this software,
via any medium, is strictly prohibited without prior written permission
of the copyright holder.
"""

FILE_HEADER = """// @license
// Copyright (c) 2019 - 2024 Dr. Gabriel Gatzsche. All Rights Reserved.
//
// Use of this source code is governed by terms that can be
// found in the LICENSE file in the root of this package."""

# Keeps the test generated by `dart create -t package` passing
BASE_DART_SNIPPET = """/// Checks if you are awesome. Spoiler: you are.
class Awesome {
  /// Returns true if you are awesome.
  bool get isAwesome => true;
}"""


def license_text(is_open_source: bool, year: int) -> str:
    """Return the license matching the package kind for the given year."""
    text = OPEN_SOURCE_LICENSE if is_open_source else PRIVATE_LICENSE
    return substitute_template_vars(text, {YEAR_PLACEHOLDER: str(year)})


def base_dart_source() -> str:
    return f"{FILE_HEADER}\n\n{BASE_DART_SNIPPET}\n"
