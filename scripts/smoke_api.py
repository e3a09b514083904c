"""
Quick API smoke run: posts every sample text to a running service
"""

import asyncio
import sys
from typing import Dict, Optional

import httpx


async def run_smoke(base_url: str = "http://localhost:8001", client: Optional[httpx.AsyncClient] = None) -> Dict[str, str]:
    """Analyze each sample and return sample name -> verification status"""

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(base_url=base_url, timeout=30.0)

    statuses = {}
    try:
        print("Testing NewsCheck API...")
        print("=" * 50)

        response = await client.get("/health")
        response.raise_for_status()
        print(f"Health: {response.json()['status']}")

        response = await client.get("/samples")
        response.raise_for_status()
        samples = response.json()

        for name, content in samples.items():
            response = await client.post("/api/analyze-news", json={"content": content})
            response.raise_for_status()
            report = response.json()
            statuses[name] = report["verificationStatus"]
            print(
                f"  {name:<12} {report['verificationStatus']:<14} "
                f"{report['contentType']:<15} credibility={report['credibilityScore']} trust={report['trustScore']}"
            )

        print("=" * 50)
        print("Smoke run completed")
    finally:
        if owns_client:
            await client.aclose()

    return statuses


if __name__ == "__main__":
    asyncio.run(run_smoke(sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8001"))
