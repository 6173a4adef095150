# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Engine Modules
roster/     boat-class registry and seat assignment
rendering/  drawing surface, text fitting and template variants
"""
