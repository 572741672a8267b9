"""
Example usage of the receipt processor
"""
import json
import sys
from pathlib import Path

import requests


def process_receipt(receipt_path: str, api_url: str = "http://localhost:8080") -> dict:
    """
    Submit a receipt JSON file and fetch its points

    Args:
        receipt_path: Path to the receipt JSON file
        api_url: Receipt processor URL

    Returns:
        Dict with the receipt id and points, None if the receipt was rejected
    """
    receipt_file = Path(receipt_path)

    if not receipt_file.exists():
        raise FileNotFoundError(f"Receipt not found: {receipt_path}")

    print(f"🧾 Reading receipt: {receipt_path}")
    with open(receipt_file, "r", encoding="utf-8") as f:
        receipt = json.load(f)

    print(f"🚀 Sending request to {api_url}/receipts/process")

    response = requests.post(
        f"{api_url}/receipts/process",
        json=receipt,
        timeout=30
    )

    if response.status_code != 200:
        print(f"❌ Error: {response.status_code}")
        print(response.json())
        return None

    receipt_id = response.json()["id"]
    print(f"🆔 Receipt id: {receipt_id}")

    response = requests.get(f"{api_url}/receipts/{receipt_id}/points", timeout=30)
    response.raise_for_status()
    points = response.json()["points"]

    print(f"\n✅ Success!")
    print(f"🏪 Retailer: {receipt.get('retailer')}")
    print(f"🛒 Items: {len(receipt.get('items', []))}")
    print(f"💰 Total: {receipt.get('total')}")
    print(f"⭐ Points: {points}")

    return {"id": receipt_id, "points": points}


def main():
    """Entry point"""
    if len(sys.argv) < 2:
        print("Usage: python example.py <path_to_receipt_json> [api_url]")
        print("Example: python example.py receipt.json")
        sys.exit(1)

    receipt_path = sys.argv[1]
    api_url = sys.argv[2] if len(sys.argv) > 2 else "http://localhost:8080"

    try:
        process_receipt(receipt_path, api_url)

    except FileNotFoundError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

    except json.JSONDecodeError as e:
        print(f"❌ Error: receipt is not valid JSON: {e}")
        sys.exit(1)

    except requests.exceptions.ConnectionError:
        print(f"❌ Error: Cannot connect to receipt processor at {api_url}")
        print("Make sure the service is running: python run.py")
        sys.exit(1)


if __name__ == "__main__":
    main()
