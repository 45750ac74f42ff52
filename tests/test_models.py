import json

from detective.models import (
	EvidenceItem,
	InvestigationResponse,
	QueryResult,
	Report,
)


def test_evidence_item_defaults_for_missing_fields():
	item = EvidenceItem.from_raw({})

	assert item.title == 'Untitled'
	assert item.content == ''
	assert item.url == '#'


def test_evidence_item_falls_back_to_snippet():
	item = EvidenceItem.from_raw({'title': 'Audit', 'snippet': 'No audit found', 'url': 'https://a.io'})

	assert item.content == 'No audit found'
	assert item.title == 'Audit'
	assert item.url == 'https://a.io'


def test_evidence_item_prefers_content_over_snippet():
	item = EvidenceItem.from_raw({'content': 'full text', 'snippet': 'short'})
	assert item.content == 'full text'


def test_response_serialization_keeps_plan_and_logs_aligned():
	plan = ['X scam', 'X audit', 'X hack']
	response = InvestigationResponse(
		plan=plan,
		logs=[
			QueryResult(query='X scam', data=[EvidenceItem('t1', 'c1', 'https://one.io')]),
			QueryResult(query='X audit', data=[]),
			QueryResult(query='X hack', data=[EvidenceItem('t2', 'c2', 'https://two.io')]),
		],
		report=Report(score=12, flags=['rug pull'], verdict='Run.'),
	)

	restored = InvestigationResponse.from_dict(json.loads(json.dumps(response.to_dict())))

	assert restored.plan == plan
	for index, query in enumerate(restored.plan):
		assert restored.logs[index].query == query
	assert restored.logs[1].data == []
	assert restored.logs[2].data[0].url == 'https://two.io'
	assert restored.report == response.report


def test_agent_log_only_serialized_on_request():
	response = InvestigationResponse(
		plan=[], logs=[], report=Report(score=50, flags=[], verdict='?'), agent_log=['[INIT] go']
	)

	assert 'agentLog' not in response.to_dict()
	assert response.to_dict(include_agent_log=True)['agentLog'] == ['[INIT] go']
