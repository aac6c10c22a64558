"""Models module - lineup domain types and the generation pipeline.

This module contains:
- positions: Position taxonomy and area predicates
- lineup: Player, FairPlaySettings, Inning, Lineup, diagnostics
- fairness: FairnessState counters threaded through a run
- first_inning: Inning-1 initializer (template or scratch)
- bench: Bench selection for innings 2..N
- assigner: Weighted position scoring and assignment
- matching: Inning assignment as a PuLP LP
- repair: Infield-guarantee repair pass
- generator: LineupGenerator orchestrating the above

For generating a lineup, use benchcoach.decisions.generate_lineup().
"""

from benchcoach.models.positions import (
    FIELD_POSITIONS,
    Position,
    PositionType,
    is_bench,
    is_catcher,
    is_field_position,
    is_infield,
    is_outfield,
    is_pitcher,
    parse_position,
    position_type,
)
from benchcoach.models.errors import InsufficientPlayersError, LineupInputError
from benchcoach.models.lineup import (
    DegradedAssignment,
    FairPlaySettings,
    GenerationDiagnostics,
    Inning,
    Lineup,
    LineupMode,
    Player,
    RepairSwap,
    TemplateSwap,
)
from benchcoach.models.fairness import FairnessState
from benchcoach.models.first_inning import FirstInningInitializer, build_first_inning
from benchcoach.models.bench import BenchDecision, BenchSelector
from benchcoach.models.assigner import PositionAssigner, PositionScorer, continuity_factor
from benchcoach.models.repair import repair_infield_guarantee
from benchcoach.models.generator import LineupGenerator

__all__ = [
    # Positions
    "FIELD_POSITIONS",
    "Position",
    "PositionType",
    "is_bench",
    "is_catcher",
    "is_field_position",
    "is_infield",
    "is_outfield",
    "is_pitcher",
    "parse_position",
    "position_type",
    # Errors
    "InsufficientPlayersError",
    "LineupInputError",
    # Domain types
    "DegradedAssignment",
    "FairPlaySettings",
    "GenerationDiagnostics",
    "Inning",
    "Lineup",
    "LineupMode",
    "Player",
    "RepairSwap",
    "TemplateSwap",
    # Pipeline
    "FairnessState",
    "FirstInningInitializer",
    "build_first_inning",
    "BenchDecision",
    "BenchSelector",
    "PositionAssigner",
    "PositionScorer",
    "continuity_factor",
    "repair_infield_guarantee",
    "LineupGenerator",
]
