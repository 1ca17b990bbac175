"""Game information and node annotations read for presentation.

None of these properties change the board; they are exposed so a viewer can
show them next to the reconstructed position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .record import GameRecord, RecordNode


class RuleSet(Enum):
    AGA = "AGA"  # American Go Association
    GOE = "GOE"  # Ing rules of Goe
    JAPANESE = "Japanese"  # Nihon-Kiin
    NZ = "NZ"  # New Zealand

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["RuleSet"]:
        if text is None:
            return None
        try:
            return cls(text.strip())
        except ValueError:
            return None


@dataclass
class GameInfo:
    """Root properties describing the game."""

    application: Optional[str] = None
    charset: Optional[str] = None
    file_format: Optional[int] = None
    annotation: Optional[str] = None
    copyright: Optional[str] = None
    date: Optional[str] = None
    place: Optional[str] = None
    event: Optional[str] = None
    round: Optional[str] = None
    game_name: Optional[str] = None
    game_comment: Optional[str] = None
    handicap: Optional[int] = None
    komi: Optional[float] = None
    opening: Optional[str] = None
    rules: Optional[RuleSet] = None
    rules_text: Optional[str] = None
    overtime: Optional[str] = None
    result: Optional[str] = None
    source: Optional[str] = None
    time_limit: Optional[float] = None
    user: Optional[str] = None
    white_player: Optional[str] = None
    black_player: Optional[str] = None
    white_team: Optional[str] = None
    black_team: Optional[str] = None
    white_rank: Optional[str] = None
    black_rank: Optional[str] = None

    @classmethod
    def from_record(cls, record: GameRecord) -> "GameInfo":
        root = record.root
        rules_text = root.get_simple_text("RU")
        return cls(
            application=root.get_simple_text("AP"),
            charset=root.get_simple_text("CA"),
            file_format=root.get_number("FF"),
            annotation=root.get_simple_text("AN"),
            copyright=root.get_simple_text("CP"),
            date=root.get_simple_text("DT"),
            place=root.get_simple_text("PC"),
            event=root.get_simple_text("EV"),
            round=root.get_simple_text("RO"),
            game_name=root.get_simple_text("GN"),
            game_comment=root.get_text("GC"),
            handicap=root.get_number("HA"),
            komi=root.get_real("KM"),
            opening=root.get_simple_text("ON"),
            rules=RuleSet.parse(rules_text),
            rules_text=rules_text,
            overtime=root.get_simple_text("OT"),
            result=root.get_simple_text("RE"),
            source=root.get_simple_text("SO"),
            time_limit=root.get_real("TM"),
            user=root.get_simple_text("US"),
            white_player=root.get_simple_text("PW"),
            black_player=root.get_simple_text("PB"),
            white_team=root.get_simple_text("WT"),
            black_team=root.get_simple_text("BT"),
            white_rank=root.get_simple_text("WR"),
            black_rank=root.get_simple_text("BR"),
        )


_POSITION_JUDGEMENTS = {
    "DM": "even",
    "GB": "good_for_black",
    "GW": "good_for_white",
    "HO": "hotspot",
    "UC": "unclear",
    "V": "value",
}
_MOVE_JUDGEMENTS = {"BM": "bad", "DO": "doubtful", "IT": "interesting", "TE": "tesuji"}
_MARKUP = ("LB", "MA", "CR", "SQ", "TR", "SL", "DD", "AR", "LN")


@dataclass
class NodeAnnotations:
    name: Optional[str] = None
    comment: Optional[str] = None
    position: Dict[str, Optional[float]] = field(default_factory=dict)
    move: List[str] = field(default_factory=list)
    markup: Dict[str, List[str]] = field(default_factory=dict)
    illegal_move_forced: bool = False
    move_number: Optional[int] = None

    @classmethod
    def from_node(cls, node: RecordNode) -> "NodeAnnotations":
        # Judgement values are optional doubles; presence alone is meaningful.
        position = {
            label: node.get_real(key)
            for key, label in _POSITION_JUDGEMENTS.items()
            if node.has(key)
        }
        move = [label for key, label in _MOVE_JUDGEMENTS.items() if node.has(key)]
        markup = {key: node.get_points(key) for key in _MARKUP if node.has(key)}
        return cls(
            name=node.get_simple_text("N"),
            comment=node.get_text("C"),
            position=position,
            move=move,
            markup=markup,
            illegal_move_forced=node.has("KO"),
            move_number=node.get_number("MN"),
        )

    @property
    def is_empty(self) -> bool:
        return not (
            self.name or self.comment or self.position or self.move or self.markup
            or self.illegal_move_forced or self.move_number is not None
        )
