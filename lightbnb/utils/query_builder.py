"""
Textual SELECT assembly with positional ($n) parameters.
Filters are collected as (template, value) pairs and numbered only when the statement is rendered.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class Clause:
    """A filter fragment; "{}" in the template marks where its placeholder goes."""
    template: str
    value: Any


@dataclass
class SelectQuery:
    """
    Builder for a grouped SELECT with optional WHERE and HAVING sections.
    
    Row filters go to WHERE, aggregate filters go to HAVING. Placeholders are
    numbered in render order (WHERE, then HAVING, then LIMIT), which is the
    order the store binds them in.
    """
    select: str
    group_by: Optional[str] = None
    order_by: Optional[str] = None
    where_clauses: List[Clause] = field(default_factory=list)
    having_clauses: List[Clause] = field(default_factory=list)
    
    def where(self, template: str, value: Any) -> "SelectQuery":
        self.where_clauses.append(Clause(template, value))
        return self
    
    def having(self, template: str, value: Any) -> "SelectQuery":
        self.having_clauses.append(Clause(template, value))
        return self
    
    def render(self, limit: Optional[int] = None) -> Tuple[str, List[Any]]:
        """
        Render the statement text and its parameter list.
        
        Args:
            limit: Optional row limit, bound as the last parameter
            
        Returns:
            Tuple of (query text, positional parameters)
        """
        params: List[Any] = []
        
        def bind(clause: Clause) -> str:
            params.append(clause.value)
            return clause.template.format(f"${len(params)}")
        
        def section(keyword: str, clauses: List[Clause]) -> str:
            return f"{keyword} " + "\n  AND ".join(bind(clause) for clause in clauses)
        
        lines = [self.select.strip()]
        if self.where_clauses:
            lines.append(section("WHERE", self.where_clauses))
        if self.group_by:
            lines.append(f"GROUP BY {self.group_by}")
        if self.having_clauses:
            lines.append(section("HAVING", self.having_clauses))
        if self.order_by:
            lines.append(f"ORDER BY {self.order_by}")
        if limit is not None:
            params.append(limit)
            lines.append(f"LIMIT ${len(params)}")
        
        return "\n".join(lines) + ";", params
