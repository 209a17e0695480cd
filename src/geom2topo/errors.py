"""
geom2topo errors

name: errors.py
by:   Gumyr
date: March 3rd 2025

desc:

Exceptions raised by the conversion pipeline. Both are fatal for the conversion that raised
them and are never retried. Trims without backing data are not errors; they are reported with
a warning and skipped.

license:

    Copyright 2025 Gumyr

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

"""


class UnsupportedGeometryError(ValueError):
    """The geometry, curve or surface kind has no conversion"""


class DegenerateTopologyError(RuntimeError):
    """The kernel could not build a valid edge, wire, face, shell or cell"""
