# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Rediscover: search a music catalog, revisit albums, and drive playback."""

__version__ = "0.1.0"
