#!/usr/bin/env python3
"""
Demo script for the country cache.

This script walks through the data source policies against the live
REST Countries API, using in-memory storage so no Redis is needed.
"""

import asyncio
import time

from country_cache import (
    DataSourcePolicy,
    InMemoryStorage,
    RestCountriesSource,
    SortCriteria,
    StoredCountrySource,
    TieredCountryRepository,
    sort_countries,
)
from country_cache.errors import CountryCacheError


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def timed_fetch(repository: TieredCountryRepository, policy: DataSourcePolicy) -> None:
    """Fetch with a policy and report count and latency."""
    start = time.perf_counter()
    try:
        countries = await repository.fetch_all(policy)
    except CountryCacheError as e:
        print(f"  {policy.value:<28} failed: {e}")
        return
    elapsed = (time.perf_counter() - start) * 1000
    print(f"  {policy.value:<28} {len(countries):>4} countries in {elapsed:7.1f} ms")


async def demo_policies(repository: TieredCountryRepository) -> None:
    """Demonstrate each data source policy."""
    print_section("Data Source Policies")

    print(f"  Local data valid before first fetch: {await repository.has_valid_local_data()}")
    await timed_fetch(repository, DataSourcePolicy.LOCAL_ONLY)
    await timed_fetch(repository, DataSourcePolicy.REMOTE_WITH_LOCAL_FALLBACK)
    print(f"  Local data valid after remote fetch: {await repository.has_valid_local_data()}")
    await timed_fetch(repository, DataSourcePolicy.LOCAL_WITH_REMOTE_REFRESH)
    await timed_fetch(repository, DataSourcePolicy.LOCAL_ONLY)


async def demo_search(repository: TieredCountryRepository) -> None:
    """Demonstrate remote search and sorting."""
    print_section("Search and Sort")

    results = await repository.search("united")
    print(f"  'united' matched {len(results)} countries")

    for country in sort_countries(results, SortCriteria.POPULATION)[:5]:
        print(f"    {country.name.common:<30} {country.formatted_population:>15}  {country.formatted_area}")


async def main() -> None:
    """Run all demos."""
    remote = RestCountriesSource.create()
    repository = TieredCountryRepository.create(
        remote=remote,
        local=StoredCountrySource(storage=InMemoryStorage()),
    )

    try:
        await demo_policies(repository)
        await demo_search(repository)
    finally:
        await remote.close()

    print_section("Done")


if __name__ == "__main__":
    asyncio.run(main())
