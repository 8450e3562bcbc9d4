"""Prompts for whole-resume helpers: generation, polishing, job matching."""

from __future__ import annotations

from resume_builder.models.improvement import PromptPair

GENERATE_SYSTEM = (
    "You are a professional resume writer. Generate compelling resume content "
    "based on the provided profile information."
)

POLISH_SYSTEM = (
    "You are a professional resume optimizer. Improve the given resume content with "
    "stronger action verbs, quantified achievements, and better formatting."
)

TAILOR_SYSTEM = (
    "You are a resume optimization expert. Tailor the resume content to match the "
    "job description while maintaining accuracy."
)

COVER_LETTER_SYSTEM = (
    "You are a professional cover letter writer. Generate a compelling cover letter "
    "based on the resume and job description."
)

ATS_SYSTEM = (
    "You are an ATS (Applicant Tracking System) expert. Analyze the resume against the "
    "job description and provide a score from 0-100 with specific improvement suggestions. "
    "Return a JSON object with 'score' and 'suggestions' fields."
)


def generate_prompts(profile: str) -> PromptPair:
    return PromptPair(
        system_prompt=GENERATE_SYSTEM,
        user_prompt=f"Please help me create a professional resume based on this information: {profile}",
    )


def polish_prompts(content: str) -> PromptPair:
    return PromptPair(
        system_prompt=POLISH_SYSTEM,
        user_prompt=f"Please improve this resume content: {content}",
    )


def _job_match_user(resume: str, job_description: str, ask: str) -> str:
    return f"Resume: {resume}\n\nJob Description: {job_description}\n\n{ask}"


def tailor_prompts(resume: str, job_description: str) -> PromptPair:
    return PromptPair(
        system_prompt=TAILOR_SYSTEM,
        user_prompt=_job_match_user(
            resume,
            job_description,
            "Please tailor this resume to better match the job requirements.",
        ),
    )


def cover_letter_prompts(resume: str, job_description: str) -> PromptPair:
    return PromptPair(
        system_prompt=COVER_LETTER_SYSTEM,
        user_prompt=_job_match_user(
            resume, job_description, "Please write a professional cover letter."
        ),
    )


def ats_prompts(resume: str, job_description: str) -> PromptPair:
    return PromptPair(
        system_prompt=ATS_SYSTEM,
        user_prompt=_job_match_user(
            resume,
            job_description,
            "Please analyze this resume and provide an ATS score with improvement suggestions.",
        ),
    )
