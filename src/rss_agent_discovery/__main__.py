from rss_agent_discovery.cli import app

if __name__ == "__main__":
    app(prog_name="rss-agent-discovery")
