"""Registry of licenses that can be written into a scaffolded project.

License texts are Jinja2 templates rendered with a single ``copyright``
variable.  Headers are inserted verbatim into the comment block at the top
of every generated Go file.
"""

from __future__ import annotations

from .models import License
from ..errors import UnknownLicenseError


_MIT_TERMS = """\
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE."""

_BSD_PREAMBLE = """\
Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice,
   this list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution."""

_BSD_THIRD_CLAUSE = """

3. Neither the name of the copyright holder nor the names of its contributors
   may be used to endorse or promote products derived from this software
   without specific prior written permission."""

_BSD_DISCLAIMER = """

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
POSSIBILITY OF SUCH DAMAGE."""

_BSD2_TERMS = _BSD_PREAMBLE + _BSD_DISCLAIMER
_BSD3_TERMS = _BSD_PREAMBLE + _BSD_THIRD_CLAUSE + _BSD_DISCLAIMER

_APACHE_HEADER = """\
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License."""


LICENSES: dict[str, License] = {
    "none": License(
        name="None",
        possible_matches=["none", "false"],
        header="",
        text="",
    ),
    "mit": License(
        name="MIT License",
        possible_matches=["mit"],
        header=_MIT_TERMS,
        text="The MIT License (MIT)\n\n{{ copyright }}\n\n" + _MIT_TERMS + "\n",
    ),
    "bsd-2": License(
        name="Simplified BSD License",
        possible_matches=["freebsd", "simpbsd", "simple bsd", "2-clause bsd", "2 clause bsd",
                          "simplified bsd license", "bsd-2", "bsd-2-clause"],
        header="All rights reserved.\n\nUse of this source code is governed by a "
        "BSD-style license that can be\nfound in the LICENSE file.",
        text="{{ copyright }}\nAll rights reserved.\n\n" + _BSD2_TERMS + "\n",
    ),
    "bsd": License(
        name="NewBSD",
        possible_matches=["bsd", "newbsd", "3 clause bsd", "3-clause bsd", "bsd-3",
                          "bsd-3-clause"],
        header="All rights reserved.\n\nUse of this source code is governed by a "
        "BSD-style license that can be\nfound in the LICENSE file.",
        text="{{ copyright }}\nAll rights reserved.\n\n" + _BSD3_TERMS + "\n",
    ),
    "apache": License(
        name="Apache 2.0",
        possible_matches=["apache", "apache20", "apache 2.0", "apache2.0", "apache-2.0"],
        header=_APACHE_HEADER,
        text="{{ copyright }}\n\n" + _APACHE_HEADER + "\n",
    ),
}

DEFAULT_LICENSE = "none"


def find_license(name: str) -> License:
    """Look up a license by registry key, display name, or alias.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        UnknownLicenseError: If nothing matches.
    """
    wanted = name.strip().lower()
    for key, lic in LICENSES.items():
        if wanted == key or wanted == lic.name.lower() or wanted in lic.possible_matches:
            return lic
    raise UnknownLicenseError(name)


def custom_license(header: str, text: str) -> License:
    """Build a user-supplied license from configuration values."""
    return License(name="Custom", possible_matches=[], header=header, text=text)


def license_names() -> list[str]:
    """Registry keys, for CLI help and choices."""
    return sorted(LICENSES)
