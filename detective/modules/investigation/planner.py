from detective.models import QueryPlan

TARGET_TYPE = 'crypto'

QUERY_TEMPLATES = (
	'{subject} crypto scam fraud rug pull',
	'{subject} cryptocurrency security audit vulnerabilities',
	'{subject} crypto exchange hack exploit allegations',
)


class QueryPlanner:
	def plan(self, subject: str) -> QueryPlan:
		# Plain concatenation so braces in the subject are never treated as format fields.
		queries = [template.replace('{subject}', subject) for template in QUERY_TEMPLATES]
		return QueryPlan(queries=queries, target_type=TARGET_TYPE)
