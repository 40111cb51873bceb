import sys

import httpx

API_BASE = "http://localhost:8000/api/v1"
DEFAULT_URL = "https://docs.python.org/3/"


def run_analysis(target_url: str):
    print(f"Analyzing {target_url}...")
    try:
        resp = httpx.post(f"{API_BASE}/ai-readiness", json={"url": target_url}, timeout=90.0)
        if resp.status_code != 200:
            print(f"Analysis failed ({resp.status_code}): {resp.json().get('detail')}")
            return
        report = resp.json()

        print(f"Overall score: {report['overallScore']}")
        for check in report["checks"]:
            print(f"  [{check['status']:<7}] {check['label']:<20} {check['score']:>3}  {check['details']}")

        print("Requesting AI insights...")
        insights_resp = httpx.post(
            f"{API_BASE}/ai-analysis",
            json={
                "url": report["url"],
                "htmlContent": report["htmlContent"],
                "currentChecks": report["checks"],
            },
            timeout=120.0,
        )
        insights_resp.raise_for_status()
        insights = insights_resp.json()

        print(f"AI readiness: {insights['overallAIReadiness']}")
        for insight in insights["insights"]:
            print(f"  {insight['label']}: {insight['score']} ({insight['status']})")
        print("Top priorities:")
        for priority in insights["topPriorities"]:
            print(f"  - {priority}")

    except httpx.HTTPError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    run_analysis(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL)
