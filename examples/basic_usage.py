#!/usr/bin/env python3
"""
Basic ghtrending usage example.

Parses a trending page held in memory, then (with --live) fetches the
real pages from GitHub.
Run with: python examples/basic_usage.py [--live]
"""

import logging
import sys

from ghtrending import (
    TIME_TODAY,
    TIME_WEEK,
    ConfigurationError,
    Mode,
    TrendingClient,
    TrendingError,
    build_trending_url,
    configure_logging,
)

PAGE = """
<ol class="repo-list">
  <li>
    <h3><a href="/campoy/go-tooling-workshop"><span>campoy /</span>
      go-tooling-workshop</a></h3>
    <div class="py-1"><p>A talk and workshop on Go tooling</p></div>
    <div class="f6">
      <span itemprop="programmingLanguage">Go</span>
      <a href="/campoy/go-tooling-workshop/graphs/contributors">
        <img title="campoy" src="https://avatars3.githubusercontent.com/u/2237452?v=3&amp;s=40">
      </a>
      <span class="float-sm-right">1,472 stars today</span>
    </div>
  </li>
</ol>
"""

print("=== ghtrending Basic Usage Example ===\n")

# 1. Page addresses
print("1. Building trending URLs...")
print(f"   Repositories, today, Go: {build_trending_url(Mode.REPOSITORIES, TIME_TODAY, 'go')}")
print(f"   Developers, this week:   {build_trending_url(Mode.DEVELOPERS, TIME_WEEK)}")
print(f"   Site defaults:           {build_trending_url(Mode.REPOSITORIES)}")
print("\n   OK: URLs built\n")

# 2. Configuration errors surface at construction time
print("2. Testing configuration errors...")
try:
    TrendingClient(base_url="github.com")
except ConfigurationError as e:
    print(f"   Caught ConfigurationError: {e}")
print("\n   OK: Configuration checked\n")

# 3. Extraction from markup the caller already holds
print("3. Parsing a page held in memory...")
with TrendingClient() as client:
    for project in client.projects.parse(PAGE):
        print(f"   {project.name} [{project.language}] +{project.stars}")
        print(f"   {project.url}")
        for contributor in project.contributors:
            print(f"   built by {contributor.display_name} (id {contributor.id}) {contributor.avatar}")
print("\n   OK: Page parsed\n")

# 4. Live pages
if "--live" not in sys.argv:
    print("4. Skipping live requests (pass --live to fetch github.com)")
    sys.exit(0)

print("4. Fetching live trending pages...")
configure_logging(level=logging.WARNING, http_level=logging.DEBUG)
try:
    with TrendingClient.from_env() as client:
        languages = client.languages.trending()
        print(f"   Trending languages: {', '.join(lang.name for lang in languages)}")

        for project in client.projects.get(TIME_WEEK)[:5]:
            print(f"   {project.name}: {project.stars} stars this week")

        for developer in client.developers.get(TIME_TODAY)[:5]:
            print(f"   {developer.display_name} ({developer.full_name}) {developer.url}")
except TrendingError as e:
    print(f"   Request failed: {e}")
    sys.exit(1)

print("\n=== Done ===")
