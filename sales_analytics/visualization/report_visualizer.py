from typing import List, Optional, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from sales_analytics.models.report import ReportRow
from sales_analytics.utils.logger import get_logger

class ReportVisualizer:
    """Create visual representations of sales reports"""
    
    def __init__(self, figsize: Tuple[int, int] = (12, 6)):
        self.figsize = figsize
        self.logger = get_logger()
        self.palette = sns.color_palette("deep", 2)
    
    def plot_report(self, rows: List[ReportRow],
                    title: str = "Seller Profit and Bonus",
                    save_path: Optional[str] = None) -> plt.Figure:
        """Grouped bar chart of profit and bonus per seller, in rank order"""
        sns.set_style("whitegrid")
        fig, ax = plt.subplots(1, 1, figsize=self.figsize)
        
        names = [row.name for row in rows]
        positions = np.arange(len(rows))
        width = 0.4
        
        ax.bar(positions - width / 2, [row.profit for row in rows], width,
               label='Profit', color=self.palette[0])
        ax.bar(positions + width / 2, [row.bonus for row in rows], width,
               label='Bonus', color=self.palette[1])
        
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xticks(positions)
        ax.set_xticklabels(names, rotation=45, ha='right')
        ax.set_ylabel('Amount')
        ax.legend()
        
        fig.tight_layout()
        
        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            self.logger.info(f"Report chart saved to {save_path}")
            # Saved charts are detached from pyplot; the Figure stays usable
            plt.close(fig)

        return fig
