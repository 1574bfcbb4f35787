#!/usr/bin/env python3
"""
Search Highlight CLI - Command-line interface for the Search Highlight API.

Usage:
    python hl.py terms "<query>"
    python hl.py highlight <file.html> [--query QUERY] [--tag TAG ...] [--output FILE]
    python hl.py window <total> [--page N] [--page-size N]
    python hl.py analytics
    python hl.py health

Examples:
    python hl.py terms 't=faith AND "the ark" -hate'
    python hl.py highlight results.html --query "t=love~3"
    python hl.py highlight results.html --tag G0026 --tag G5368
    python hl.py window 120 --page 3
"""

import argparse
import os
import requests
import sys
from pathlib import Path
from typing import List, Optional

# Configuration
API_BASE_URL = os.environ.get("HL_API_URL", "http://localhost:8000")
ACCESS_KEY = os.environ.get("HL_ACCESS_KEY", "dev-key")
ACCESS_KEY_HEADER = "X-Access-Key"


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def print_success(message: str):
    """Print success message in green."""
    print(f"{Colors.GREEN}✓ {message}{Colors.ENDC}")


def print_error(message: str):
    """Print error message in red."""
    print(f"{Colors.FAIL}✗ {message}{Colors.ENDC}", file=sys.stderr)


def print_info(message: str):
    """Print info message in cyan."""
    print(f"{Colors.CYAN}ℹ {message}{Colors.ENDC}")


def print_header(message: str):
    """Print header message in bold."""
    print(f"\n{Colors.BOLD}{Colors.HEADER}{message}{Colors.ENDC}\n")


def _error_detail(response: requests.Response) -> str:
    try:
        return str(response.json().get('detail', 'Unknown error'))
    except ValueError:
        return response.text


def extract(query: str):
    """Show the terms a query would highlight."""
    headers = {ACCESS_KEY_HEADER: ACCESS_KEY}

    try:
        response = requests.post(
            f"{API_BASE_URL}/terms",
            json={"query": query},
            headers=headers
        )

        if response.status_code == 200:
            terms = response.json()["terms"]
            print_header(f"Terms ({len(terms)})")
            for term in terms:
                print(f"  {Colors.BLUE}{term}{Colors.ENDC}")
            return True
        else:
            print_error(f"Extraction failed: {_error_detail(response)}")
            return False

    except requests.exceptions.RequestException as e:
        print_error(f"Connection error: {e}")
        return False


def highlight_file(file_path: str, query: Optional[str] = None,
                   tags: Optional[List[str]] = None, output: Optional[str] = None):
    """Highlight an HTML file by query terms or tag ids."""
    file_path = Path(file_path)

    if not file_path.is_file():
        print_error(f"File not found: {file_path}")
        return False

    if not query and not tags:
        print_error("Give a --query or at least one --tag")
        return False

    request_data = {
        "html": file_path.read_text(encoding='utf-8'),
        "query": query,
        "tag_ids": tags or None
    }
    headers = {ACCESS_KEY_HEADER: ACCESS_KEY}

    try:
        response = requests.post(
            f"{API_BASE_URL}/highlight",
            json=request_data,
            headers=headers
        )

        if response.status_code == 200:
            result = response.json()
            print_success(f"Highlighted {result['matches']} matches ({result['mode']})")
            if result['terms']:
                print(f"  Terms: {', '.join(result['terms'])}")

            if output:
                Path(output).write_text(result['html'], encoding='utf-8')
                print_info(f"Written to {output}")
            else:
                print(result['html'])
            return True
        else:
            print_error(f"Highlight failed: {_error_detail(response)}")
            return False

    except requests.exceptions.RequestException as e:
        print_error(f"Connection error: {e}")
        return False


def show_window(total: int, page: int, page_size: Optional[int] = None):
    """Show the result window for a page."""
    params = {"total": total, "page_number": page}
    if page_size:
        params["page_size"] = page_size

    try:
        response = requests.get(f"{API_BASE_URL}/window", params=params)

        if response.status_code == 200:
            data = response.json()
            print(f"{Colors.BOLD}{data['label']}{Colors.ENDC}")
            return True
        else:
            print_error(f"Window failed: {_error_detail(response)}")
            return False

    except requests.exceptions.RequestException as e:
        print_error(f"Connection error: {e}")
        return False


def show_analytics():
    """Show analytics and usage statistics."""
    print_info("Fetching analytics...")

    try:
        response = requests.get(f"{API_BASE_URL}/analytics")

        if response.status_code == 200:
            data = response.json()

            print_header("Analytics Overview")
            overview = data['overview']
            print(f"Total Requests: {Colors.BOLD}{overview['total_requests']}{Colors.ENDC}")
            print(f"Total Matches: {Colors.BOLD}{overview['total_matches']}{Colors.ENDC}")
            print(f"Queries Without Terms: {overview['empty_queries']}")

            print_header("Performance")
            perf = data['performance']
            print(f"Avg Response Time: {Colors.CYAN}{perf['avg_response_time_ms']:.1f}ms{Colors.ENDC}")
            print(f"Avg Terms: {perf['avg_terms_per_query']:.1f}")
            print(f"Avg Matches: {perf['avg_matches_per_request']:.1f}")

            if data.get('popular_queries'):
                print_header("Popular Queries")
                for query_data in data['popular_queries'][:5]:
                    print(f"  {query_data['count']}x: {query_data['query']}")

            return True
        else:
            print_error("Failed to fetch analytics")
            return False

    except requests.exceptions.RequestException as e:
        print_error(f"Connection error: {e}")
        return False


def check_health():
    """Check API health status."""
    try:
        response = requests.get(f"{API_BASE_URL}/healthz")

        if response.status_code == 200:
            data = response.json()
            print_success("API is healthy")
            print(f"  Status: {data['status']}")
            return True
        else:
            print_error("API is unhealthy")
            return False

    except requests.exceptions.RequestException as e:
        print_error(f"Connection error: {e}")
        print_info(f"Make sure the API is running at {API_BASE_URL}")
        return False


def main():
    parser = argparse.ArgumentParser(
        description="Search Highlight CLI - Extract terms and highlight search results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s terms 't=faith AND "the ark" -hate'
  %(prog)s highlight results.html --query "t=love~3" --output out.html
  %(prog)s highlight results.html --tag G0026
  %(prog)s window 120 --page 3
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Terms command
    terms_parser = subparsers.add_parser('terms', help='Extract display terms from a query')
    terms_parser.add_argument('query', help='Query in search syntax')

    # Highlight command
    highlight_parser = subparsers.add_parser('highlight', help='Highlight an HTML file')
    highlight_parser.add_argument('file', help='Path to the HTML file')
    highlight_parser.add_argument('--query', help='Query whose terms should be highlighted')
    highlight_parser.add_argument('--tag', action='append', dest='tags', help='Tag id to highlight (repeatable)')
    highlight_parser.add_argument('--output', help='Write highlighted HTML here instead of stdout')

    # Window command
    window_parser = subparsers.add_parser('window', help='Show the result window label')
    window_parser.add_argument('total', type=int, help='Total number of results')
    window_parser.add_argument('--page', type=int, default=1, help='Page number (default: 1)')
    window_parser.add_argument('--page-size', type=int, help='Results per page')

    # Analytics command
    subparsers.add_parser('analytics', help='Show usage analytics')

    # Health command
    subparsers.add_parser('health', help='Check API health')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    success = False
    if args.command == 'terms':
        success = extract(args.query)
    elif args.command == 'highlight':
        success = highlight_file(args.file, args.query, args.tags, args.output)
    elif args.command == 'window':
        success = show_window(args.total, args.page, args.page_size)
    elif args.command == 'analytics':
        success = show_analytics()
    elif args.command == 'health':
        success = check_health()

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
