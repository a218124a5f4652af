from coordination_framework.data.sample_agents import get_sample_agent, list_sample_agents

__all__ = ["get_sample_agent", "list_sample_agents"]
