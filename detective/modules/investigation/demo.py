"""Canned investigation for a well-known reference scam.

Requests for this subject never reach the search or model providers, so the demo
works without API keys or network access.
"""

from detective.models import EvidenceItem, InvestigationResponse, QueryResult, Report

DEMO_SUBJECTS = frozenset({'ftx', 'ftx token'})


def is_demo_subject(subject: str) -> bool:
	return subject.strip().lower() in DEMO_SUBJECTS


def build_demo_response(subject: str) -> InvestigationResponse:
	logs = [
		QueryResult(
			query='FTX crypto scam fraud rug pull',
			data=[
				EvidenceItem(
					title='FTX Collapse: $8 Billion Fraud Case',
					content=(
						'FTX exchange collapsed in November 2022 after it was revealed that customer funds were '
						'misused. Founder Sam Bankman-Fried was charged with fraud, money laundering, and conspiracy. '
						'The exchange lost over $8 billion in customer funds.'
					),
					url='https://www.sec.gov/news/press-release/2022-219',
				),
				EvidenceItem(
					title='FTX Bankruptcy: Largest Crypto Exchange Failure',
					content=(
						'FTX filed for bankruptcy after a liquidity crisis. Investigations revealed massive fraud, '
						'with customer funds being used for risky investments and personal expenses. Over 1 million '
						'customers lost their funds.'
					),
					url='https://www.reuters.com/ftx-bankruptcy',
				),
			],
		),
		QueryResult(
			query='FTX cryptocurrency security audit vulnerabilities',
			data=[
				EvidenceItem(
					title='FTX Security Failures and Missing Funds',
					content=(
						'FTX had no proper security audits. Customer funds were stored in unsecured accounts and used '
						'without permission. The exchange lacked basic security controls and proper fund segregation.'
					),
					url='https://www.coindesk.com/ftx-security',
				),
				EvidenceItem(
					title='FTX Regulatory Violations',
					content=(
						'FTX operated without proper regulatory oversight. The exchange violated multiple securities '
						'laws and failed to protect customer assets. Multiple regulatory bodies launched investigations.'
					),
					url='https://www.cftc.gov/ftx-investigation',
				),
			],
		),
		QueryResult(
			query='FTX crypto exchange hack exploit allegations',
			data=[
				EvidenceItem(
					title='FTX: The Complete Story of a Crypto Scam',
					content=(
						'FTX promised to revolutionize crypto trading but was built on fraud. The exchange misused '
						'billions in customer funds, leading to one of the largest crypto collapses in history. '
						'Founder faces multiple criminal charges.'
					),
					url='https://www.bbc.com/ftx-scandal',
				),
				EvidenceItem(
					title='FTX Scandal: How Customer Funds Were Stolen',
					content=(
						'The FTX scandal revealed systematic fraud where customer deposits were used for risky '
						'trading, personal loans, and political donations. The exchange had no proper accounting or '
						'fund segregation.'
					),
					url='https://www.wsj.com/ftx-fraud',
				),
			],
		),
	]

	report = Report(
		score=0,
		flags=[
			'SEC fraud charges',
			'Founder convicted of fraud',
			'$8+ billion in customer funds lost',
			'No proper security audits',
			'Customer funds misused',
			'Exchange collapse and bankruptcy',
			'Well-documented crypto scam case',
		],
		verdict=(
			'Complete fraud. FTX collapsed after misusing over $8 billion in customer funds. The founder was '
			'convicted of fraud. This is one of the largest crypto exchange failures in history. Avoid at all costs.'
		),
	)

	return InvestigationResponse(
		plan=[result.query for result in logs],
		logs=logs,
		report=report,
		agent_log=[
			f'[INIT] Starting investigation on "{subject}"',
			'[DEMO] Safety net activated - known high-risk crypto case detected',
		],
	)
