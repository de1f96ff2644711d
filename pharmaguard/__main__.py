import argparse

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Run the PharmaGuard API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    uvicorn.run("pharmaguard.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
