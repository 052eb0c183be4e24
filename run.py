"""
Simple launcher for the Card Offer Finder.
This runs the Streamlit UI, which loads the feeds and builds the catalogs itself.
"""

import os
import sys
import subprocess

def main():
    data_dir = os.getenv("OFFER_FINDER_DATA_DIR", "data")

    print(" CARD OFFER FINDER")
    print("=" * 60)
    print()
    print(f" Feeds directory: {data_dir}")
    print("  allCards.csv for the card catalog")
    print("  one CSV per merchant for offers")
    print()
    print(" Starting Streamlit UI...")
    print(" Will open at: http://localhost:8501")
    print(" Press Ctrl+C to stop")
    print("=" * 60)
    print()

    streamlit_script = os.path.join(os.path.dirname(__file__), "offer_finder", "ui", "streamlit_app.py")

    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run",
            streamlit_script
        ], check=True)
    except KeyboardInterrupt:
        print("\n\n Shutting down gracefully...")
    except subprocess.CalledProcessError as e:
        print(f"\n Streamlit exited with code {e.returncode}")
        print("\n Try running directly:")
        print(f"   streamlit run {streamlit_script}")

if __name__ == "__main__":
    main()
