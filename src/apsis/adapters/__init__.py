# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for config input and report output.

External dependencies (tomllib, json, file I/O) are confined to this layer.
"""
