#!/usr/bin/env python3
"""
Generate an article from a YouTube video

Runs the same pipeline as POST /api/generate, either in-process or
against a running API server.

Usage:
    python3 scripts/generate_article_cli.py <url> [options]

Examples:
    python3 scripts/generate_article_cli.py "https://youtu.be/abc123xy"
    python3 scripts/generate_article_cli.py "https://youtube.com/watch?v=abc123xy" --length long --language Korean
    python3 scripts/generate_article_cli.py "https://youtu.be/abc123xy" --api-url http://localhost:3000

Options:
    --style            Style preset (e.g. "Casual blog post")
    --detail           Extra style instructions
    --length           short, medium or long (default: medium)
    --language         Output language, or "auto"
    --api-url          Call a running API server instead of processing locally
    --show-transcript  Print the normalized transcript before the article
    --json             Print the raw result as JSON

Environment Variables:
    OPENAI_API_KEY     Enables LLM generation (otherwise rule-based)
    LLM_PROVIDER       openai (default) or anthropic
    API_URL            Alternative to --api-url flag
"""

import argparse
import json
import logging
import os
import sys
from typing import Dict, Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import httpx
import requests
from dotenv import load_dotenv

from app.services.video_article_service import VideoArticleService
from core.config import Settings
from core.errors import ArticleServiceError
from processors.article_generator import ArticleGenerator
from processors.transcript_processor import TranscriptProcessor


def generate_locally(url: str, style: Optional[str], detail: Optional[str],
                     length: str, language: Optional[str]) -> Dict:
    """Run the pipeline in this process"""
    settings = Settings.from_env()
    with requests.Session() as session:
        service = VideoArticleService(
            transcript_processor=TranscriptProcessor(
                session=session,
                languages=settings.transcript_languages
            ),
            generator=ArticleGenerator(settings)
        )
        result = service.process(url, style, detail, length, language)
    return {
        'videoId': result['video_id'],
        'transcript': result['transcript'],
        'truncated': result['truncated'],
        'article': result['article'],
        'mode': result['mode'],
    }


def generate_via_api(url: str, style: Optional[str], detail: Optional[str],
                     length: str, language: Optional[str], api_url: str) -> Dict:
    """Call POST /api/generate on a running server"""
    payload = {
        'url': url,
        'stylePreset': style,
        'styleDetail': detail,
        'length': length,
        'language': language,
    }

    with httpx.Client(timeout=None) as client:
        response = client.post(f"{api_url.rstrip('/')}/api/generate", json=payload)

    try:
        body = response.json()
    except ValueError:
        body = {}

    if response.status_code != 200:
        raise ArticleServiceError(body.get('error') or f"Request failed with status {response.status_code}")

    return body


def main():
    parser = argparse.ArgumentParser(description='Generate an article from a YouTube video')
    parser.add_argument('url', help='YouTube video URL')
    parser.add_argument('--style', help='Style preset')
    parser.add_argument('--detail', help='Extra style instructions')
    parser.add_argument('--length', default='medium', choices=['short', 'medium', 'long'])
    parser.add_argument('--language', default='auto', help='Output language, or "auto"')
    parser.add_argument('--api-url', default=os.environ.get('API_URL'),
                        help='API server URL (default: process locally)')
    parser.add_argument('--show-transcript', action='store_true', help='Print the transcript too')
    parser.add_argument('--json', action='store_true', help='Print the raw result as JSON')

    args = parser.parse_args()

    load_dotenv('.env.local')
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.api_url:
            result = generate_via_api(args.url, args.style, args.detail,
                                      args.length, args.language, args.api_url)
        else:
            result = generate_locally(args.url, args.style, args.detail,
                                      args.length, args.language)
    except ArticleServiceError as e:
        print(f"❌ {e.message}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"❌ Could not reach API server: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return

    mode_label = "LLM" if result['mode'] == 'external' else "Rule-based (no API key or LLM failure)"
    print(f"🎬 Video: {result['videoId']}")
    print(f"🤖 Generation: {mode_label}")
    if result['truncated']:
        print("✂️ Transcript was truncated for length")

    if args.show_transcript:
        print("\n=== TRANSCRIPT ===\n")
        print(result['transcript'])

    print("\n=== ARTICLE ===\n")
    print(result['article'])


if __name__ == "__main__":
    main()
