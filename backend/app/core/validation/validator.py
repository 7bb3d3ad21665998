from .catalog import HSNCatalog
from .rules import HierarchyRule, exists_in_catalog, format_problem
from .verdict import RejectReason, Verdict


class HSNValidator:
    """Run the rules against one normalized code.

    Order: format → existence → hierarchy. The first failing check
    decides the verdict and nothing after it runs, so malformed codes
    never reach the catalog.
    """

    def __init__(self, catalog: HSNCatalog, hierarchy_rule: HierarchyRule | None = None):
        self.catalog = catalog
        self.hierarchy_rule = hierarchy_rule or HierarchyRule(catalog)

    def validate(self, code: str) -> Verdict:
        problem = format_problem(code)
        if problem:
            return Verdict.rejected(code, RejectReason.FORMAT, problem)

        if not exists_in_catalog(self.catalog, code):
            return Verdict.rejected(code, RejectReason.NOT_FOUND, "not in catalog")

        missing = self.hierarchy_rule.missing_ancestors(code)
        if missing:
            return Verdict.rejected(
                code,
                RejectReason.HIERARCHY,
                f"missing parent level(s): {', '.join(missing)}",
            )

        return Verdict.accepted(code, self.catalog.lookup(code))
