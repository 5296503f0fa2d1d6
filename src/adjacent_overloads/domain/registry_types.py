from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    short_description: str
    display_name: str
    symbol: str
    message_id: str
    message_template: str
    manual_instructions: str
    proactive_guidance: str
    rule_type: str
    recommended: str
    tslint_equivalent: str
    references: list[str]
    rule_id: str
