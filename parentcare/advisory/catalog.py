"""
Advisory Catalogs
Predefined emergency scenarios and quick-pick questions offered by the shell
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from parentcare.utils.errors import NotFoundError


@dataclass(frozen=True)
class EmergencyScenario:
    """An emergency the shell offers as a one-tap choice"""

    id: str
    title: str  # Label sent to the emergency guide composer
    subtitle: str


EMERGENCY_SCENARIOS: Tuple[EmergencyScenario, ...] = (
    EmergencyScenario(id="choking", title="噎食/窒息", subtitle="Choking"),
    EmergencyScenario(id="burns", title="烧伤/烫伤", subtitle="Burns"),
    EmergencyScenario(id="cpr", title="心肺复苏", subtitle="Child CPR"),
    EmergencyScenario(id="poison", title="误食/中毒", subtitle="Poisoning"),
    EmergencyScenario(id="head", title="头部受伤", subtitle="Head Injury"),
    EmergencyScenario(id="seizure", title="惊厥/抽搐", subtitle="Seizure"),
)

_SCENARIOS_BY_ID: Dict[str, EmergencyScenario] = {
    scenario.id: scenario for scenario in EMERGENCY_SCENARIOS
}

SUGGESTED_TOPICS: List[str] = [
    "2岁宝宝如厕训练方法",
    "18个月宝宝每天需要睡多久",
    "如何应对宝宝发脾气",
    "适合幼儿的健康零食",
    "1-3岁语言发育里程碑",
]

COMMON_SYMPTOMS: List[str] = [
    "发烧超过38.5度",
    "夜间干咳",
    "呕吐腹泻",
    "腹部红疹",
    "抓耳朵哭闹",
]


def get_emergency_scenario(scenario_id: str) -> EmergencyScenario:
    """
    Look up a predefined emergency scenario.

    Raises:
        NotFoundError: If the id is not in the catalog
    """
    scenario = _SCENARIOS_BY_ID.get(scenario_id)
    if scenario is None:
        raise NotFoundError(
            f"Unknown emergency scenario: {scenario_id}",
            details={"available": sorted(_SCENARIOS_BY_ID)},
        )
    return scenario
