"""PDF/UA 7.5: tables need header cells and a regular structure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable, List, Set, Tuple

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import SemanticNode, TableNode
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType

_ERROR_CODE_FINDINGS: Dict[SemanticErrorCode, Tuple[str, PDFUASeverity]] = {
    SemanticErrorCode.TABLE_MISSING_HEADERS: (
        "Table is missing header cells",
        PDFUASeverity.ERROR,
    ),
    SemanticErrorCode.TABLE_IRREGULAR_STRUCTURE: (
        "Table has irregular structure (inconsistent columns or gaps)",
        PDFUASeverity.ERROR,
    ),
    SemanticErrorCode.TABLE_ROW_COUNT_MISMATCH: (
        "Visual and semantic row counts do not match",
        PDFUASeverity.WARNING,
    ),
    SemanticErrorCode.TABLE_COLUMN_COUNT_MISMATCH: (
        "Visual and semantic column counts do not match",
        PDFUASeverity.WARNING,
    ),
    SemanticErrorCode.TABLE_CELL_BELOW_NEXT_ROW: (
        "Table cell positioned below the next row",
        PDFUASeverity.ERROR,
    ),
    SemanticErrorCode.TABLE_CELL_ABOVE_PREVIOUS_ROW: (
        "Table cell positioned above the previous row",
        PDFUASeverity.ERROR,
    ),
    SemanticErrorCode.TABLE_CELL_RIGHT_OF_NEXT_COLUMN: (
        "Table cell positioned right of the next column",
        PDFUASeverity.ERROR,
    ),
    SemanticErrorCode.TABLE_CELL_LEFT_OF_PREVIOUS_COLUMN: (
        "Table cell positioned left of the previous column",
        PDFUASeverity.ERROR,
    ),
    SemanticErrorCode.TABLE_ROW_SPAN_MISMATCH: (
        "Row span does not match visual layout",
        PDFUASeverity.WARNING,
    ),
    SemanticErrorCode.TABLE_COL_SPAN_MISMATCH: (
        "Column span does not match visual layout",
        PDFUASeverity.WARNING,
    ),
}

_CELL_TYPES = frozenset({SemanticType.TABLE_HEADER, SemanticType.TABLE_CELL})


def merge_coordinates(values: Iterable[float], tolerance: float) -> List[float]:
    """Sort ruling coordinates and drop any within ``tolerance`` of the previous one kept."""
    merged: List[float] = []
    for value in sorted(values):
        if merged and value - merged[-1] <= tolerance:
            continue
        merged.append(value)
    return merged


@dataclass(frozen=True)
class TableChecker(PDFUAChecker):
    """Validates header cells, row regularity and the visual grid of a table.

    Warnings and info findings are reported but only error-severity findings
    fail the check.
    """

    requirement: ClassVar[PDFUARequirement] = PDFUARequirement.TABLES_MUST_HAVE_HEADERS

    require_headers: bool = True
    validate_regularity: bool = True
    validate_visual_match: bool = True
    visual_match_tolerance: float = 2.0

    def __post_init__(self) -> None:
        if self.visual_match_tolerance < 0:
            raise ValueError("visual_match_tolerance must be >= 0")

    @classmethod
    def strict(cls) -> "TableChecker":
        return cls(visual_match_tolerance=1.0)

    @classmethod
    def lenient(cls) -> "TableChecker":
        return cls(
            require_headers=False,
            validate_regularity=False,
            validate_visual_match=False,
            visual_match_tolerance=5.0,
        )

    @classmethod
    def basic(cls) -> "TableChecker":
        return cls(
            require_headers=True,
            validate_regularity=False,
            validate_visual_match=False,
            visual_match_tolerance=2.0,
        )

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        if not isinstance(node, TableNode):
            return PDFUACheckResult.passing(self.requirement, context="Node is not a table")

        violations: List[PDFUAViolation] = []
        if self.require_headers:
            violations.extend(self._check_headers(node))
        if self.validate_regularity:
            violations.extend(self._check_regularity(node))
        if self.validate_visual_match and node.has_visual_border:
            violations.extend(self._check_visual_match(node))
        violations.extend(self._check_cells(node))
        violations.extend(self._check_error_codes(node))

        if not violations:
            return PDFUACheckResult.passing(
                self.requirement,
                context=f"Table is properly structured with {node.row_count} rows",
            )
        result = PDFUACheckResult.from_violations(self.requirement, violations)
        if result.passed:
            context = (
                f"Table is properly structured with {node.row_count} rows "
                f"({len(violations)} informational note(s))"
            )
        else:
            context = f"Found {len(violations)} table violation(s)"
        return result.model_copy(update={"context": context})

    def visual_grid(self, table: TableNode) -> Tuple[int, int]:
        """Visual (rows, columns) after merging rulings closer than the tolerance."""
        xs = merge_coordinates(table.visual_border_x_coordinates, self.visual_match_tolerance)
        ys = merge_coordinates(table.visual_border_y_coordinates, self.visual_match_tolerance)
        return max(0, len(ys) - 1), max(0, len(xs) - 1)

    def _check_headers(self, table: TableNode) -> List[PDFUAViolation]:
        violations: List[PDFUAViolation] = []
        if not table.has_headers:
            violations.append(
                self._violation(
                    table,
                    "Table has no header cells (TH elements) - all tables must have headers",
                )
            )
            if table.row_count > 1:
                violations.append(
                    self._violation(
                        table, f"Table with {table.row_count} rows has no header cells"
                    )
                )
        elif table.table_head is None:
            violations.append(
                self._violation(
                    table,
                    "Table has header cells but no THead element (recommended for clarity)",
                    PDFUASeverity.WARNING,
                )
            )
        return violations

    def _check_regularity(self, table: TableNode) -> List[PDFUAViolation]:
        violations: List[PDFUAViolation] = []
        if not table.has_consistent_column_count:
            violations.append(
                self._violation(
                    table,
                    "Table has inconsistent column counts across rows - structure is irregular",
                )
            )
        for row in table.all_rows:
            if not table.cells_in_row(row):
                violations.append(self._violation(row, "Table row has no cells"))
        return violations

    def _check_visual_match(self, table: TableNode) -> List[PDFUAViolation]:
        violations: List[PDFUAViolation] = []
        visual_rows, visual_columns = self.visual_grid(table)
        if visual_rows != table.row_count:
            violations.append(
                self._violation(
                    table,
                    f"Visual table has {visual_rows} rows but semantic table "
                    f"has {table.row_count} rows",
                    PDFUASeverity.WARNING,
                )
            )
        columns = table.max_cells_per_row
        if columns > 0 and visual_columns != columns:
            violations.append(
                self._violation(
                    table,
                    f"Visual table has {visual_columns} columns but semantic table "
                    f"has {columns} columns",
                    PDFUASeverity.WARNING,
                )
            )
        return violations

    def _check_cells(self, table: TableNode) -> List[PDFUAViolation]:
        violations: List[PDFUAViolation] = []
        for row in table.all_rows:
            cell_types = {cell.type for cell in table.cells_in_row(row)}
            if cell_types == _CELL_TYPES:
                violations.append(
                    self._violation(
                        row,
                        "Table row contains both header cells (TH) and data cells (TD)",
                        PDFUASeverity.INFO,
                    )
                )
            for child in row.children:
                if child.type not in _CELL_TYPES:
                    violations.append(
                        self._violation(
                            child,
                            f"Invalid cell type '{child.type}' in table row "
                            "(expected TH or TD)",
                        )
                    )
        return violations

    def _check_error_codes(self, table: TableNode) -> List[PDFUAViolation]:
        covered: Set[SemanticErrorCode] = set()
        if self.require_headers:
            covered.add(SemanticErrorCode.TABLE_MISSING_HEADERS)
        if self.validate_regularity:
            covered.add(SemanticErrorCode.TABLE_IRREGULAR_STRUCTURE)
        if self.validate_visual_match:
            covered.update(
                {
                    SemanticErrorCode.TABLE_ROW_COUNT_MISMATCH,
                    SemanticErrorCode.TABLE_COLUMN_COUNT_MISMATCH,
                }
            )

        violations: List[PDFUAViolation] = []
        recorded = {code for code in table.error_codes if code in _ERROR_CODE_FINDINGS}
        codes = (table.validate_structure() | recorded) - covered
        for code in sorted(codes):
            description, severity = _ERROR_CODE_FINDINGS.get(
                code, (f"Table validation error: {int(code)}", PDFUASeverity.ERROR)
            )
            violations.append(self._violation(table, description, severity))
        return violations


__all__ = ["TableChecker", "merge_coordinates"]
