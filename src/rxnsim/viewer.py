import plotly.graph_objects as go

from rxnsim.layout import bond_pairs, layout_atoms

ATOM_SIZE = 14
HYDROGEN_SIZE = 8
BOND_COLOR = "#B0B0B0"


def molecule_figure(structure: str, seed=None, height: int = 300) -> go.Figure:
    """Ball-and-stick style Plotly figure; drag rotates, scroll zooms."""
    sites = layout_atoms(structure, seed)
    fig = go.Figure()

    for a, b in bond_pairs(len(sites)):
        fig.add_trace(go.Scatter3d(
            x=[sites[a].x, sites[b].x],
            y=[sites[a].y, sites[b].y],
            z=[sites[a].z, sites[b].z],
            mode="lines",
            line=dict(color=BOND_COLOR, width=6),
            hoverinfo="skip",
            showlegend=False,
        ))

    if sites:
        fig.add_trace(go.Scatter3d(
            x=[s.x for s in sites],
            y=[s.y for s in sites],
            z=[s.z for s in sites],
            mode="markers+text",
            text=[s.symbol for s in sites],
            textposition="top center",
            marker=dict(
                size=[HYDROGEN_SIZE if s.symbol == "H" else ATOM_SIZE for s in sites],
                color=[s.color for s in sites],
                line=dict(color="#333333", width=1),
            ),
            hovertemplate="%{text}<extra></extra>",
            showlegend=False,
        ))

    hidden = dict(visible=False, showbackground=False)
    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=0, b=0),
        scene=dict(xaxis=hidden, yaxis=hidden, zaxis=hidden, aspectmode="data"),
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
