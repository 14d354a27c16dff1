# -*- coding: utf-8 -*-
# objsto, minimal Python client for Amazon S3 Compatible Cloud Storage,
# (C) 2026 objsto authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""XML decoding functions."""

from __future__ import annotations

from typing import Optional
from xml.etree import ElementTree as ET


def _namespaced(element: ET.Element, name: str) -> tuple[str, dict[str, str]]:
    """Namespace arguments for find and findall."""
    def _get_namespace() -> str:
        """Exact namespace if found."""
        start = element.tag.find("{")
        if start < 0:
            return ""
        start += 1
        end = element.tag.find("}")
        if end < 0:
            return ""
        return element.tag[start:end]

    namespace = _get_namespace()
    if namespace:
        name = "/".join(f"ns:{token}" for token in name.split("/"))
        return name, {"ns": namespace}
    return name, {}


def find(
        element: ET.Element,
        name: str,
        strict: bool = False,
) -> Optional[ET.Element]:
    """Namespace aware ElementTree.Element.find()."""
    name, namespaces = _namespaced(element, name)
    elem = element.find(name, namespaces=namespaces)
    if strict and elem is None:
        raise ValueError(f"XML element <{name}> not found")
    return elem


def findtext(
    element: ET.Element,
    name: str,
    strict: bool = False,
    default: Optional[str] = None,
) -> Optional[str]:
    """
    Namespace aware ElementTree.Element.findtext() with strict flag
    raises ValueError if element name not exist.
    """
    elem = find(element, name, strict=strict)
    return default if elem is None else (elem.text or "")
