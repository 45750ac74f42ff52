import pytest

from detective.models import EvidenceItem, FindingCategory, VerdictLabel
from detective.modules.investigation import build_demo_response, to_investigation_result
from detective.modules.investigation.result_adapter import categorize, source_name, verdict_label


@pytest.mark.parametrize('score, label', [(100, VerdictLabel.SAFE), (70, VerdictLabel.SAFE), (69, VerdictLabel.SORT_OF_RISKY), (40, VerdictLabel.SORT_OF_RISKY), (39, VerdictLabel.LIKELY_RISKY), (0, VerdictLabel.LIKELY_RISKY)])
def test_verdict_label_thresholds(score, label):
	assert verdict_label(score) == label


def test_categorize():
	assert categorize(EvidenceItem('SEC sues exchange', '', 'https://www.sec.gov/x')) == FindingCategory.LEGAL
	assert categorize(EvidenceItem('Thread', 'people talk', 'https://reddit.com/r/x')) == FindingCategory.SOCIAL
	assert categorize(EvidenceItem('Token price crash', '', 'https://example.org')) == FindingCategory.FINANCIAL
	assert categorize(EvidenceItem('Story', '', 'https://www.coindesk.com/y')) == FindingCategory.NEWS
	assert categorize(EvidenceItem('Whitepaper', 'a protocol', 'https://proto.dev')) == FindingCategory.GENERAL


def test_source_name():
	assert source_name('https://www.reuters.com/ftx') == 'reuters.com'
	assert source_name('#') == 'Unknown source'


def test_demo_response_converts_to_result():
	result = to_investigation_result('FTX', build_demo_response('FTX'))
	data = result.to_dict()

	assert data['subject'] == 'FTX'
	assert data['legitimacyScore'] == 0
	assert data['verdict'] == 'LIKELY RISKY'
	assert len(data['findings']) == 6
	assert data['findings'][0]['id'] == 'finding-0-0'
	assert data['findings'][0]['category'] == 'legal'
	assert data['createdAt']
