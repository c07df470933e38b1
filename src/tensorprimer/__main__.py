# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.
from tensorprimer.cli import main

raise SystemExit(main())
