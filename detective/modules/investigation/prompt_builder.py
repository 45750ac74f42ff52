from detective.models import QueryResult


def format_evidence(results: list[QueryResult]) -> str:
    sections = []

    for index, result in enumerate(results, 1):
        header = f"=== Query {index}: {result.query} ===\n"
        items = [
            f"Result {item_index}:\nTitle: {item.title}\nContent: {item.content}\n"
            for item_index, item in enumerate(result.data, 1)
        ]
        sections.append(header + "\n---\n\n".join(items))

    return "\n\n".join(sections)


def build_analysis_prompt(subject: str, results: list[QueryResult]) -> str:
    evidence_str = format_evidence(results)

    prompt = f"""You are a Noir Forensic Analyst investigating the cryptocurrency "{subject}". Analyze the following search results and determine legitimacy.

Search Results:
{evidence_str}

Act as a cynical, hard-boiled detective specializing in crypto investigations. Extract red flags related to scams, rug pulls, security vulnerabilities, exchange hacks, and fraudulent activities. Determine if this crypto is likely risky, sort of risky, or safe.

Return ONLY a valid JSON object (no markdown, no code blocks, no explanations) with this exact structure:
{{
  "score": <integer 0-100, where 0 is likely risky and 100 is safe>,
  "flags": ["flag1", "flag2", ...],
  "verdict": "<short, cynical summary in one sentence>"
}}

Be harsh but fair. If you find serious red flags (rug pulls, scams, hacks, security issues), score low. If it's clean and legitimate, score high."""

    return prompt
