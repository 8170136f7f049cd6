from __future__ import annotations

CAREER_GUIDANCE_PROMPT = (
    "You are an expert career coach. Generate personalized career guidance, strategic advice, "
    "and growth suggestions for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{guidance: string, strategicAdvice: string[], growthSuggestions: string[]}}."
)

CAREER_PATH_PROMPT = (
    "You are an expert career path analyst. Generate a real-world career path visualization "
    "for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{milestones: string[], requiredSkills: string[], "
    "estimatedCompletionTime: string, progressTracking: string}}."
)

COVER_LETTER_PROMPT = (
    "You are an expert cover letter writer. Generate a personalized, ATS-optimized cover letter "
    "for the role of {job_title} at {company_name}. "
    "Use this user profile: {profile_json} and job description: {job_description}. "
    "Return as JSON: {{content: string, feedback: string, improvementTip: string}}."
)

INDUSTRY_PULSE_PROMPT = (
    "You are an expert industry analyst. Generate insights for the {industry} industry "
    "based on this market data: {context_json}. "
    "Return as JSON: {{insights: string[], learningSuggestions: string[]}}."
)

INTERVIEW_PREP_PROMPT = (
    "You are an expert interview coach. Generate personalized interview questions, model answers, "
    "and feedback for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{questions: [{{question: string, answer: string}}], feedback: string, tips: string[]}}."
)

INTERVIEW_PROMPT = (
    "You are an expert interview coach. Generate personalized interview preparation tips, "
    "common questions, and strategic advice for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{tips: string[], commonQuestions: string[], strategicAdvice: string}}."
)

JOB_SEARCH_PROMPT = (
    "You are an expert job search strategist. Generate personalized job search strategies, "
    "recommendations, and insights for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{strategies: string[], recommendations: string[], insights: string}}."
)

LINKEDIN_OPTIMIZER_PROMPT = (
    "You are an expert LinkedIn profile optimizer. Analyze this LinkedIn profile: {linked_in_url} "
    "for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{analysis: string, growthSuggestions: string[], optimizationTips: string[]}}."
)

ONBOARDING_PROMPT = (
    "You are an expert onboarding coach. Generate personalized onboarding content, recommendations, "
    "and next steps for this user profile: {profile_json}, preferences: {preferences_json}, "
    "and goals: {goals_json}. "
    "Return as JSON: {{content: string, recommendations: string[], nextSteps: string[]}}."
)

RESUME_PROMPT = (
    "You are an expert resume writer. Generate an ATS-optimized, industry-standard resume "
    "for the role of {target_role} in the {industry} industry. "
    "Use this user profile: {profile_json}. "
    "Return as JSON: {{content: string, feedback: string, improvementTip: string}}."
)

RESUME_EVALUATION_PROMPT = (
    "You are an expert resume evaluator. Evaluate this resume for the role of {target_role} "
    "in the {industry} industry:\n{resume_json}\n"
    "Return as JSON: {{atsScore: number (0-100), feedback: string, improvementTip: string}}."
)
