# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Template Variants
One stateless renderer class per visual style.
"""

from rowgram.modules.rendering.templates.championship_gold import ChampionshipGoldTemplate
from rowgram.modules.rendering.templates.classic_lineup import ClassicLineupTemplate
from rowgram.modules.rendering.templates.elite_performance import ElitePerformanceTemplate
from rowgram.modules.rendering.templates.henley_poster import HenleyPosterTemplate
from rowgram.modules.rendering.templates.minimal_clean import MinimalCleanTemplate
from rowgram.modules.rendering.templates.modern_card import ModernCardTemplate
from rowgram.modules.rendering.templates.oxbridge_herald import OxbridgeHeraldTemplate
from rowgram.modules.rendering.templates.race_day import RaceDayTemplate
from rowgram.modules.rendering.templates.regatta_royal import RegattaRoyalTemplate
from rowgram.modules.rendering.templates.vintage_classic import VintageClassicTemplate

__all__ = [
    "OxbridgeHeraldTemplate",
    "ModernCardTemplate",
    "RaceDayTemplate",
    "ChampionshipGoldTemplate",
    "ClassicLineupTemplate",
    "MinimalCleanTemplate",
    "VintageClassicTemplate",
    "ElitePerformanceTemplate",
    "RegattaRoyalTemplate",
    "HenleyPosterTemplate",
]
