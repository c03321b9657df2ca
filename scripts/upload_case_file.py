"""Script to open a case and upload a file to it through the Casebinder API."""

import sys
import requests
from pathlib import Path

BASE_URL = "http://localhost:8000/api/v1"


def upload_case_file(file_path: str, case_name: str = "Sample Case"):
    path = Path(file_path)

    if not path.exists():
        print(f"❌ Error: File not found at {file_path}")
        return

    try:
        response = requests.post(f"{BASE_URL}/cases/", json={"name": case_name})
        response.raise_for_status()
        case_id = response.json()["id"]
        print(f"📁 Opened case {case_name!r} ({case_id})")

        print(f"📤 Uploading {path.name}...")
        with open(path, "rb") as f:
            files = {"file": (path.name, f)}
            response = requests.post(f"{BASE_URL}/cases/{case_id}/uploads", files=files)
            response.raise_for_status()

        result = response.json()
        print(f"✅ Upload Successful!")
        print(f"🆔 Upload ID: {result['id']}")
        print(f"📄 Pages: {result['page_count']}")
        print(f"📦 Size: {result['size_bytes']} bytes")

        text = result.get("extracted_text")
        if text:
            print("\n📝 Text Preview (first 500 chars):")
            print("-" * 50)
            print(text[:500] + "...")
            print("-" * 50)
        else:
            print("ℹ️  No text extracted for this format.")

    except requests.exceptions.RequestException as e:
        print(f"❌ Upload failed: {e}")
        print("💡 Make sure the server is running (uvicorn app.main:app --reload)")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/upload_case_file.py <path_to_file> [case name]")
    else:
        upload_case_file(sys.argv[1], *sys.argv[2:3])
