# -*- coding: utf-8 -*-
"""
Core Module - Packing, installing and their collaborators.

Contains configuration, the artifact builder and install resolver, and
the default file listing, archiving, source control, manifest and
platform collaborators they delegate to.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-10-17
"""
