"""
Transcript Processing Module

Handles extraction of YouTube transcripts.
"""

import logging
from typing import Dict, List, Optional

import requests
from youtube_transcript_api import YouTubeTranscriptApi

logger = logging.getLogger(__name__)


class TranscriptProcessor:
    """Handles transcript extraction and processing"""

    def __init__(self, session: Optional[requests.Session] = None, languages: Optional[List[str]] = None):
        self.session = session if session else requests.Session()
        self.languages = languages or ['en']
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get_youtube_transcript(self, video_id: str) -> Dict:
        """
        Extract transcript from YouTube video

        Prefers a manual transcript in the configured languages, then an
        auto-generated one, then whatever transcript the video has.

        Args:
            video_id: YouTube video ID

        Returns:
            Dictionary with transcript data, or with success=False and an error
        """
        try:
            ytt_api = YouTubeTranscriptApi(http_client=self.session)
            transcript_list = ytt_api.list(video_id)

            try:
                transcript = transcript_list.find_manually_created_transcript(self.languages)
                transcript_type = 'manual'
            except Exception:
                try:
                    transcript = transcript_list.find_generated_transcript(self.languages)
                    transcript_type = 'auto_generated'
                except Exception:
                    transcript = next(iter(transcript_list), None)
                    transcript_type = 'other_language'

            if transcript is None:
                return {
                    'success': False,
                    'error': 'No transcript available',
                    'video_id': video_id
                }

            transcript_data = transcript.fetch()

            # Convert to serializable format
            transcript_list_data = []
            for entry in transcript_data:
                transcript_list_data.append({
                    'start': float(getattr(entry, 'start', 0) or 0),
                    'text': entry.text,
                    'duration': float(getattr(entry, 'duration', 0) or 0)
                })

            self.logger.info(
                f"📝 Fetched {transcript_type} transcript for {video_id} "
                f"({len(transcript_list_data)} entries)"
            )

            return {
                'success': True,
                'transcript': transcript_list_data,
                'type': transcript_type,
                'language': getattr(transcript, 'language_code', None),
                'video_id': video_id,
                'total_entries': len(transcript_list_data)
            }

        except Exception as e:
            self.logger.warning(f"Could not extract transcript for {video_id}: {e}")
            return {
                'success': False,
                'error': str(e),
                'video_id': video_id
            }
