"""
Analyze a customer review with Azure OpenAI.

Requires AZURE_API_KEY, AZURE_DEPLOYMENT and AZURE_API_BASE in the
environment or in a .env file in the working directory.
"""

import os
import sys
import logging

# Add src directory to path
_src_dir = os.path.join(os.path.dirname(__file__), '../src')
sys.path.insert(0, _src_dir)

from jsonbind.analyzer import SentimentAnalyzer

logging.basicConfig(level=logging.INFO)

REVIEW = "This product isn't working and I need someone to contact me immediately."


def main():
    analyzer = SentimentAnalyzer()
    print(analyzer.analyze(REVIEW))


if __name__ == "__main__":
    main()
