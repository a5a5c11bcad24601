"""
Prompt composition for outreach generation.

Three templates (job, collaboration, friendship), each with an email and a
LinkedIn variant. The sender's resume is either inlined as text or, when a
PDF is on file, referenced as an attachment that travels with the model call.
"""
from typing import Optional

EMAIL_WORD_LIMIT = 200
LINKEDIN_WORD_LIMITS = {"job": 100, "collaboration": 100, "friendship": 80}

TEMPLATES = {
    "job": {
        "intro": (
            "You are an expert at writing high-converting cold outreach for job seekers. "
            "Write a message that cuts through the noise and gets a reply."
        ),
        "principles_title": "CRITICAL PRINCIPLES",
        "principles": [
            f"Keep it under {EMAIL_WORD_LIMIT} words (less is more)",
            "Plain, conversational language: no buzzwords, corporate speak or AI-sounding phrases",
            "Be specific, with concrete results taken from the actual resume",
            "Make ONE clear, specific ask",
            "Show genuine interest based on what you know about them",
            "Sound human: contractions, natural flow, casual but professional",
            "Format: who you are, why you're reaching out, why they should care",
        ],
        "default_name": "Hiring team",
        "looking_for_label": "What they're looking for",
        "include_role": True,
        "hints": {
            "company_info": "- Reference their company description: \"{value}\"",
            "company_site": "- Reference specific details from their company website/product",
            "linkedin": "- Reference details from their LinkedIn profile/background",
            "looking_for": "- Directly address what they're looking for: \"{value}\"",
            "role": "- Reference their role: {value}",
        },
        "pdf_background": (
            "Analyze the attached resume PDF to understand the user's background, skills and "
            "experience. Focus on specific achievements with measurable results."
        ),
        "email": [
            "Write a complete, ready-to-send cold email with NO placeholders, brackets, or comments.",
            "",
            "EMAIL STRUCTURE:",
            "1. OPENS with who you are (1 sentence max)",
            "2. STATES why you're reaching out to them/their company specifically",
            "3. HIGHLIGHTS 1-2 of the most relevant achievements from the resume, with results",
            "4. MAKES one clear, specific ask (15-minute call, coffee chat, or a concrete next step)",
            "5. SOUNDS completely human and conversational",
            "",
            "Include a compelling subject line (6-8 words max).",
        ],
        "linkedin": [
            "Write a complete, ready-to-send LinkedIn DM with NO placeholders, brackets, or comments.",
            "",
            "LINKEDIN MESSAGE STYLE:",
            "- Much more casual and direct than email",
            "- Keep under {limit} words",
            "- Get straight to the point",
            "- Ask directly: \"Do you have any open roles?\" or similar",
            "- Less about selling yourself, more about asking what's available",
            "- Social media tone, like messaging a friend",
            "- No formal greetings or signatures",
            "",
            "STRUCTURE:",
            "1. Quick intro (who you are in 5-7 words)",
            "2. Direct question about opportunities",
            "3. Brief mention of relevant experience",
            "4. Simple ask for the next step",
        ],
        "closing": (
            "CRITICAL: Write the actual content. Do NOT use placeholders. If you don't have specific "
            "information, write around it naturally. The message must be ready to copy and send."
        ),
    },
    "collaboration": {
        "intro": (
            "You are writing a collaboration outreach message between founders/builders. "
            "This is about mutual value, not job seeking."
        ),
        "principles_title": "COLLABORATION PRINCIPLES",
        "principles": [
            "Lead with specific value you can provide",
            "Show you understand their current challenges/projects",
            "Propose concrete ways to work together",
            "Peer-to-peer, never supplicant",
            f"Under {EMAIL_WORD_LIMIT} words, plain language",
            "One clear next step",
        ],
        "default_name": "Team",
        "looking_for_label": "What they're working on",
        "include_role": False,
        "hints": {
            "company_info": "- Reference their company description for collaboration fit: \"{value}\"",
            "company_site": "- Reference details of their company/product that open collaboration opportunities",
            "linkedin": "- Reference their background from LinkedIn for collaboration fit",
            "looking_for": "- Directly address what they're working on: \"{value}\"",
        },
        "pdf_background": (
            "Analyze the attached resume PDF to understand the user's technical skills, projects and "
            "expertise that could be valuable for a collaboration."
        ),
        "email": [
            "Write a complete, ready-to-send collaboration email with NO placeholders, brackets, or comments.",
            "",
            "EMAIL STRUCTURE:",
            "1. OPENS with a specific observation about their work/company",
            "2. INTRODUCES yourself with relevant credibility (1-2 sentences max)",
            "3. PROPOSES specific value you can provide, based on your actual skills/experience",
            "4. SUGGESTS concrete collaboration ideas",
            "5. ASKS for one specific next step",
            "",
            "The subject line should hint at the collaboration opportunity.",
        ],
        "linkedin": [
            "Write a complete, ready-to-send LinkedIn DM with NO placeholders, brackets, or comments.",
            "",
            "LINKEDIN COLLABORATION STYLE:",
            "- Casual, founder-to-founder tone",
            "- Talk openly about what you're both working on",
            "- Focus on alignment and mutual benefit",
            "- Keep under {limit} words",
            "- Direct and conversational",
            "- \"Hey, I'm working on X, saw you're doing Y, think there might be some overlap\"",
            "",
            "STRUCTURE:",
            "1. Quick intro about what you're working on",
            "2. Mention what you saw about their work",
            "3. Point out the potential alignment",
            "4. Simple ask to chat more",
        ],
        "closing": (
            "CRITICAL: Write the actual content with NO placeholders. Confident, peer-to-peer tone. "
            "The message must be ready to copy and send."
        ),
    },
    "friendship": {
        "intro": (
            "You are writing a genuine networking message focused on building an authentic "
            "professional relationship. This is about connection and mutual learning, not immediate asks."
        ),
        "principles_title": "NETWORKING PRINCIPLES",
        "principles": [
            "Lead with genuine curiosity about their work",
            "Find authentic connection points (shared experiences, interests)",
            "Offer value or insight, don't just take",
            "Conversational but professional",
            "No asks for jobs or favors",
            "Focus on learning and relationship building",
        ],
        "default_name": "Professional",
        "looking_for_label": "Their focus",
        "include_role": False,
        "hints": {
            "company_info": "- Reference their company description to show understanding: \"{value}\"",
            "company_site": "- Reference interesting aspects of their company/work as a connection point",
            "linkedin": "- Reference shared interests or background from their LinkedIn",
            "looking_for": "- Show interest in what they're focused on: \"{value}\"",
        },
        "pdf_background": (
            "Analyze the attached resume PDF to find genuine connection points: shared technologies, "
            "similar career paths, complementary experience."
        ),
        "email": [
            "Write a complete, ready-to-send networking email with NO placeholders, brackets, or comments.",
            "",
            "EMAIL STRUCTURE:",
            "1. OPENS with specific interest in their work/company (not generic praise)",
            "2. SHARES a genuine connection point from your actual background",
            "3. OFFERS something of value from your real experience",
            "4. EXPRESSES curiosity about their experience/perspective",
            "5. SUGGESTS a low-pressure connection (coffee chat, informal call)",
            "6. SOUNDS genuinely interested in them as a person",
            "",
            "The subject line should be warm and specific to them.",
        ],
        "linkedin": [
            "Write a complete, ready-to-send LinkedIn DM with NO placeholders, brackets, or comments.",
            "",
            "LINKEDIN NETWORKING STYLE:",
            "- Super casual and friendly",
            "- Like adding a friend on social media",
            "- Focus on staying connected and seeing each other's posts",
            "- Keep under {limit} words",
            "- \"Hey, I see you're also working on AI stuff. I'm really into AI too. Would be cool to stay connected!\"",
            "- Natural, conversational tone",
            "",
            "STRUCTURE:",
            "1. Quick observation about a shared interest/background",
            "2. Mention your similar interest",
            "3. Suggest staying connected to see each other's content",
            "4. Keep it light and social",
        ],
        "closing": (
            "CRITICAL: Write the actual content with NO placeholders. Natural, curious and authentic, "
            "like connecting with someone on social media. The message must be ready to copy and send."
        ),
    },
}


def word_limit(outreach_type: str, message_type: str) -> int:
    if message_type == "email":
        return EMAIL_WORD_LIMIT
    return LINKEDIN_WORD_LIMITS[outreach_type]


def _reference_hints(template: dict, job_data: dict, enrichment: dict) -> list:
    hints = template["hints"]
    company_info = job_data.get("company_info")
    looking_for = job_data.get("looking_for")
    role = job_data.get("role")
    company_site = enrichment.get("company_site_info")
    linkedin = enrichment.get("linkedin_search_info")

    lines = []
    if company_info:
        lines.append(hints["company_info"].format(value=company_info))
    if company_site:
        lines.append(hints["company_site"])
    if linkedin:
        lines.append(hints["linkedin"])
    if looking_for:
        lines.append(hints["looking_for"].format(value=looking_for))
    if role and "role" in hints:
        lines.append(hints["role"].format(value=role))
    if not company_info and not company_site and not linkedin:
        lines.append("- Use general but genuine language about their work/company")
    return lines


def build_prompt(
    outreach_type: str,
    message_type: str,
    job_data: dict,
    enrichment: Optional[dict] = None,
    resume_text: Optional[str] = None,
    has_pdf_resume: bool = False,
    goals: str = ""
) -> str:
    """
    Compose the full instruction text for one message.

    Args:
        outreach_type: job, collaboration or friendship
        message_type: email or linkedin
        job_data: Target contact fields (entry field names)
        enrichment: Output of EnrichmentService.enrich
        resume_text: Inlined when there is no PDF
        has_pdf_resume: The PDF is attached to the model call
        goals: The sender's stated goals
    """
    template = TEMPLATES[outreach_type]
    enrichment = enrichment or {}

    lines = [template["intro"], "", f"{template['principles_title']}:"]
    lines += [f"- {p}" for p in template["principles"]]

    lines += [
        "",
        "TARGET DETAILS:",
        f"Person: {job_data.get('name') or template['default_name']}",
        f"Company: {job_data.get('company') or 'Unknown Company'}",
        f"Company Description: {job_data.get('company_info') or 'Not specified'}",
    ]
    if template["include_role"]:
        lines.append(f"Role: {job_data.get('role') or 'Not specified'}")
    lines += [
        f"{template['looking_for_label']}: {job_data.get('looking_for') or 'Not specified'}",
        f"LinkedIn URL: {job_data.get('linkedinurl') or 'Not provided'}",
        f"Company URL: {job_data.get('company_url') or 'Not provided'}",
    ]

    lines += ["", "ENRICHED CONTEXT ABOUT THEM:"]
    if enrichment.get("company_site_info"):
        lines += ["COMPANY WEBSITE INFO:", enrichment["company_site_info"], ""]
    if enrichment.get("linkedin_search_info"):
        lines += ["LINKEDIN SEARCH RESULTS:", enrichment["linkedin_search_info"], ""]

    lines += ["", "HOW TO REFERENCE THEM (use the enriched context):"]
    lines += _reference_hints(template, job_data, enrichment)

    if has_pdf_resume:
        background = template["pdf_background"]
    else:
        background = resume_text or "No resume provided"
    lines += ["", "USER'S BACKGROUND:", background, "", "USER'S GOALS:", goals or "", ""]

    lines += [f"MESSAGE TYPE: {message_type} (email or LinkedIn)", ""]
    limit = word_limit(outreach_type, message_type)
    lines += [line.format(limit=limit) for line in template[message_type]]

    lines += ["", template["closing"]]
    return "\n".join(lines)
