from datetime import UTC, datetime
from urllib.parse import urlparse

from detective.models import (
	EvidenceItem,
	Finding,
	FindingCategory,
	InvestigationResponse,
	InvestigationResult,
	VerdictLabel,
)

SAFE_THRESHOLD = 70
RISKY_THRESHOLD = 40

# Checked in order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS = [
	(FindingCategory.LEGAL, ('sec.gov', 'cftc', 'justice.gov', 'lawsuit', 'court', 'charged', 'convicted', 'regulat')),
	(FindingCategory.SOCIAL, ('reddit', 'twitter', 'x.com', 'telegram', 'discord', 'forum', 'community')),
	(FindingCategory.FINANCIAL, ('bankrupt', 'liquidity', 'funds', 'price', 'market cap', 'trading', 'investor')),
	(FindingCategory.NEWS, ('news', 'reuters', 'bbc', 'coindesk', 'wsj', 'bloomberg', 'cointelegraph')),
]


def verdict_label(score: int) -> VerdictLabel:
	if score >= SAFE_THRESHOLD:
		return VerdictLabel.SAFE
	if score >= RISKY_THRESHOLD:
		return VerdictLabel.SORT_OF_RISKY
	return VerdictLabel.LIKELY_RISKY


def categorize(item: EvidenceItem) -> FindingCategory:
	haystack = f'{item.url} {item.title} {item.content}'.lower()
	for category, keywords in CATEGORY_KEYWORDS:
		if any(keyword in haystack for keyword in keywords):
			return category
	return FindingCategory.GENERAL


def source_name(url: str) -> str:
	host = urlparse(url).netloc.lower()
	if host.startswith('www.'):
		host = host[4:]
	return host or 'Unknown source'


def to_investigation_result(subject: str, response: InvestigationResponse) -> InvestigationResult:
	findings = [
		Finding(
			id=f'finding-{query_index}-{item_index}',
			title=item.title,
			source=source_name(item.url),
			url=item.url,
			snippet=item.content,
			category=categorize(item),
		)
		for query_index, result in enumerate(response.logs)
		for item_index, item in enumerate(result.data)
	]

	return InvestigationResult(
		subject=subject,
		findings=findings,
		summary=response.report.verdict,
		legitimacy_score=response.report.score,
		verdict=verdict_label(response.report.score),
		agent_log=list(response.agent_log),
		created_at=datetime.now(UTC).isoformat(),
	)
