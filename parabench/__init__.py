# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import parabench.exception as exception
import parabench.env as env

import parabench.capabilities as capabilities
import parabench.credentials as credentials
import parabench.parameters as parameters
import parabench.hub as hub
import parabench.tunnel as tunnel

import parabench.selector as selector
import parabench.markers as markers
