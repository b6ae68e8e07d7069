"""
Prompt templates for the analysis and suggestion calls.
Literal braces in the JSON examples are doubled for str.format.
"""

ANALYSIS_PROMPT = """You are an expert ATS (Applicant Tracking System) analyzer used by Fortune 500 companies like Google, Amazon, and Microsoft.

Analyze the following job description and resume. Extract ALL relevant information and provide a comprehensive analysis.

## JOB DESCRIPTION:
{job_description}

## RESUME:
{resume}

## YOUR TASK:
Perform a thorough ATS-style analysis and return a JSON object with the following structure:

{{
    "overallScore": <number 0-100>,
    "knockoutFilters": {{
        "passed": [{{"filter": "string", "required": "string", "found": "string"}}],
        "failed": [{{"filter": "string", "required": "string", "message": "string"}}],
        "warnings": [{{"filter": "string", "required": "string", "found": "string", "message": "string"}}]
    }},
    "keywords": {{
        "extracted": ["list of ALL keywords/skills from job description"],
        "matched": ["keywords found in resume"],
        "missing": ["keywords NOT found in resume"],
        "score": <number 0-100>
    }},
    "skills": {{
        "required": ["hard and soft skills from JD"],
        "matched": ["skills found in resume"],
        "missing": ["skills NOT in resume"],
        "score": <number 0-100>
    }},
    "experience": {{
        "requiredYears": <number or null>,
        "detectedYears": <number>,
        "isRecent": <boolean>,
        "relevanceScore": <number 0-100>,
        "score": <number 0-100>
    }},
    "education": {{
        "required": "degree requirement from JD or null",
        "found": "degree found in resume or null",
        "matched": <boolean>,
        "score": <number 0-100>
    }},
    "certifications": {{
        "required": ["certifications mentioned as required in JD"],
        "found": ["certifications in resume"],
        "matched": ["matching certifications"],
        "missing": ["required but missing"],
        "score": <number 0-100>
    }},
    "jobTitle": {{
        "targetTitle": "job title from JD",
        "resumeTitles": ["titles found in resume"],
        "matchType": "exact|partial|none",
        "score": <number 0-100>
    }},
    "recommendations": [
        {{"type": "critical|important|tip", "text": "specific recommendation"}}
    ],
    "industryDetected": "detected industry (tech, healthcare, finance, marketing, etc.)"
}}

IMPORTANT RULES:
1. ONLY extract keywords that are EXPLICITLY written in the job description - DO NOT infer or assume related terms
2. If "Agile" is mentioned but "Kanban" is NOT mentioned, do NOT include "Kanban" as a keyword

STRICT MATCHING RULES (simulates real ATS systems like Workday, Taleo, iCIMS):
3. Use CASE-INSENSITIVE matching only
4. Allow simple plural forms: "test" matches "tests", "skill" matches "skills"
5. DO NOT match phrase reordering: "performance testing" does NOT match "tested performance"
6. DO NOT match word variations beyond plurals: "testing" does NOT match "tested" or "tester"
7. The keyword phrase must appear AS-IS in the resume (just case-insensitive)
8. Be STRICT - real ATS systems are not smart. If exact phrase is not found, mark as MISSING

OTHER RULES:
9. Identify knockout filters (years of experience, required degrees, mandatory certifications)
10. Be industry-agnostic - this should work for ANY job type
11. Score based on real ATS methodology: keywords (35%), experience (25%), qualifications (20%), title (10%), soft skills (10%)
12. Return ONLY valid JSON, no markdown or explanation
13. Never add keywords to the "extracted" list that don't appear in the job description text
14. In recommendations, advise users to add EXACT keyword phrases from the JD to their resume (not variations)"""


SUGGESTION_PROMPT = """You are an expert resume writer. Your task is to generate bullet points that:
1. Include the missing keywords naturally
2. Match the writing style of the existing resume
3. Sound professional and achievement-focused
4. Can be seamlessly added to the resume

## EXISTING RESUME:
{resume}

## JOB DESCRIPTION:
{job_description}

## MISSING KEYWORDS TO INCLUDE:
{missing_keywords}

## INDUSTRY CONTEXT:
{industry}

## YOUR TASK:
1. First, analyze the existing resume's writing style: action verbs, use of
   metrics, typical bullet length and tone.
2. Generate bullet points that cover ALL the missing keywords (group related
   ones together), match that style and include quantifiable achievements
   where appropriate.

Return a JSON object:
{{
    "styleAnalysis": {{
        "actionVerbs": ["verbs the person uses"],
        "usesMetrics": <boolean>,
        "avgLength": "short|medium|long",
        "tone": "formal|technical|conversational"
    }},
    "bulletPoints": [
        {{
            "text": "the bullet point text",
            "keywords": ["keywords this bullet covers"],
            "targetSection": "which resume section this fits (Experience, Skills, Summary, etc.)"
        }}
    ],
    "allKeywordsCovered": <boolean>,
    "keywordsNotCovered": ["any keywords that couldn't be naturally included"]
}}

CRITICAL RULES:
- ONLY use keywords from the MISSING KEYWORDS list above - do NOT add any other keywords
- Generate enough bullets to cover the missing keywords (aim for 5-8 bullets)
- Each bullet should cover 1-3 related keywords FROM THE MISSING LIST ONLY
- The "keywords" array for each bullet must ONLY contain keywords from the MISSING KEYWORDS list
- Return ONLY valid JSON"""


def build_analysis_prompt(resume: str, job_description: str) -> str:
    return ANALYSIS_PROMPT.format(resume=resume, job_description=job_description)


def build_suggestion_prompt(
    resume: str, job_description: str, missing_keywords: list[str], industry: str
) -> str:
    return SUGGESTION_PROMPT.format(
        resume=resume,
        job_description=job_description,
        missing_keywords=", ".join(missing_keywords),
        industry=industry or "General",
    )
