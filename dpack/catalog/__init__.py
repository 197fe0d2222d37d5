# -*- coding: utf-8 -*-
"""
Catalog Module - In-memory catalog of deployment artifacts.

Parses delimited artifact filenames into structured records, orders
them by version and answers faceted queries over the records found
beneath a root directory.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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
